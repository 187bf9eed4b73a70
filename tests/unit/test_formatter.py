"""Tests for output formatting."""

from __future__ import annotations

import json
from io import StringIO
from unittest.mock import patch

import pytest
import yaml
from rich.console import Console

from nitrapi_cli.models.cloud_server import CloudServerData, CloudserverStatus, Hardware
from nitrapi_cli.output.formatter import output, output_csv, to_plain
from nitrapi_cli.output.tables import cell, flatten, kv_table, make_table


def _capture() -> tuple[Console, StringIO]:
    buf = StringIO()
    return Console(file=buf, force_terminal=False, width=200), buf


def _render(table) -> str:
    console, buf = _capture()
    console.print(table)
    return buf.getvalue()


class TestToPlain:
    def test_model_drops_absent_fields(self):
        data = CloudServerData(cloudserver_status=CloudserverStatus.RUNNING, hostname="vm")
        assert to_plain(data) == {"cloudserver_status": "running", "hostname": "vm"}

    def test_nested_containers(self):
        data = {"items": [Hardware(cpu=2)], "n": 1}
        assert to_plain(data) == {"items": [{"cpu": 2}], "n": 1}


class TestOutputJson:
    def test_model(self):
        console, buf = _capture()
        with patch("nitrapi_cli.output.formatter.console", console):
            output(CloudServerData(hostname="vm"), "json")
        assert json.loads(buf.getvalue()) == {"hostname": "vm"}

    def test_list(self):
        console, buf = _capture()
        with patch("nitrapi_cli.output.formatter.console", console):
            output([1, 2, 3], "json")
        assert json.loads(buf.getvalue()) == [1, 2, 3]


class TestOutputYaml:
    def test_dict(self):
        console, buf = _capture()
        with patch("nitrapi_cli.output.formatter.console", console):
            output({"status": CloudserverStatus.STOPPED, "cpu": 4}, "yaml")
        assert yaml.safe_load(buf.getvalue()) == {"status": "stopped", "cpu": 4}


class TestOutputCsv:
    def test_csv_output(self):
        console, buf = _capture()
        with patch("nitrapi_cli.output.formatter.console", console):
            output_csv(["Name", "Value"], [["a", "1"], ["b", None]])
        lines = buf.getvalue().splitlines()
        assert lines[0] == "Name,Value"
        assert lines[1] == "a,1"
        assert lines[2] == "b,"

    def test_csv_without_rows_falls_back_to_json(self):
        console, buf = _capture()
        with patch("nitrapi_cli.output.formatter.console", console):
            output({"k": "v"}, "csv")
        assert json.loads(buf.getvalue()) == {"k": "v"}


class TestOutputTable:
    def test_columns_rows(self):
        console, buf = _capture()
        with patch("nitrapi_cli.output.formatter.console", console):
            output([], "table", columns=["A", "B"], rows=[["1", None]], title="Test")
        out = buf.getvalue()
        assert "Test" in out
        assert "-" in out

    def test_dict_as_kv(self):
        console, buf = _capture()
        with patch("nitrapi_cli.output.formatter.console", console):
            output({"hardware": {"cpu": 4}}, "table")
        assert "hardware.cpu" in buf.getvalue()

    def test_fallback_other(self):
        console, buf = _capture()
        with patch("nitrapi_cli.output.formatter.console", console):
            output("plain text", "table")
        assert "plain text" in buf.getvalue()


class TestTables:
    def test_cell(self):
        assert cell(None) == "-"
        assert cell(True) == "yes"
        assert cell(False) == "no"
        assert cell(("a", None)) == "a, -"
        assert cell(CloudserverStatus.RESCUE) == "rescue"

    def test_flatten(self):
        assert flatten({"a": {"b": 1, "c": {}}, "d": 2}) == {"a.b": 1, "a.c": {}, "d": 2}

    def test_make_table(self):
        out = _render(make_table("Test", ["A", "B"], [["1", "2"], ["3", "4"]]))
        assert "Test" in out
        assert "4" in out

    def test_kv_table(self):
        out = _render(kv_table({"key1": "val1", "key2": None}, title="KV"))
        assert "key1" in out
        assert "val1" in out
        assert "key2" in out


class TestUnknownFormat:
    def test_raises(self):
        with pytest.raises(ValueError, match="Unknown output format 'xml'"):
            output({"k": "v"}, "xml")
