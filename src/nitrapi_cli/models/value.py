"""String-backed enumeration that tolerates tokens it does not know.

The API adds new status and category tokens without notice, so a fixed
:class:`enum.Enum` would fail to decode them. A :class:`Value` wraps the raw
wire token instead. Subclasses list the tokens known today as upper-case
string attributes::

    class CloudserverStatus(Value):
        RUNNING = "running"
        STOPPED = "stopped"

Each of those attributes is replaced by an instance of the subclass when the
class is created, so ``CloudserverStatus.RUNNING`` compares equal to
``CloudserverStatus("running")`` and to the plain string ``"running"``.
Any other token still builds a valid instance.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


class Value:
    """A server-defined string token.

    Values of unrelated subclasses never compare equal, even when both equal
    the same plain string: ``CloudserverStatus("stopped") == "stopped"`` and
    ``GameserverStatus("stopped") == "stopped"``, yet the two values differ.
    Equality is therefore not transitive across families; do not mix
    families in a set or dict that is also keyed by plain strings.
    """

    __slots__ = ("_token",)

    _known: ClassVar[dict[str, Value]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        known: dict[str, Value] = {}
        for name, token in list(vars(cls).items()):
            if name.isupper() and isinstance(token, str):
                member = cls(token)
                setattr(cls, name, member)
                known[token] = member
        cls._known = known

    def __init__(self, token: str) -> None:
        self._token = str(token)

    @property
    def value(self) -> str:
        return self._token

    @property
    def is_known(self) -> bool:
        """True if the token is one of the constants declared on the class."""
        return self._token in self._known

    @classmethod
    def known(cls) -> tuple[Value, ...]:
        return tuple(cls._known.values())

    @classmethod
    def parse(cls, token: str) -> Value:
        """Return the declared constant for *token*, or a new instance."""
        return cls._known.get(token) or cls(token)

    def __str__(self) -> str:
        return self._token

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._token!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Value):
            same_family = isinstance(other, type(self)) or isinstance(self, type(other))
            return same_family and other._token == self._token
        if isinstance(other, str):
            return self._token == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._token)

    @classmethod
    def _validate(cls, value: Any) -> Value:
        if isinstance(value, cls):
            return value
        if isinstance(value, (str, Value)):
            return cls.parse(str(value))
        raise ValueError(
            f"{cls.__name__} expects a string token, got {type(value).__name__}"
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )
