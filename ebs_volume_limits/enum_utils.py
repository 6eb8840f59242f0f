"""Enum helpers shared by the volume and error enums.

"""

import ast
import inspect
import sys
from enum import Enum
from functools import partial
from operator import is_
from typing import Any
from typing import TypeVar


__all__ = ["StrEnum", "enum_docstrings"]

if sys.version_info >= (3, 11):
    from enum import StrEnum as StrEnum  # pylint: disable=useless-import-alias
else:

    class StrEnum(str, Enum):
        """Python 3.10 stand-in for enum.StrEnum.

        str(), format() and f-strings all render the member value, so
        f"{VolumeType.gp3}" is "gp3" on every supported interpreter.
        """

        def __new__(cls, value: str, *args: Any, **kwargs: Any) -> "StrEnum":
            if not isinstance(value, str):
                raise TypeError(f"{value!r} is not a string")
            member = str.__new__(cls, value)
            member._value_ = value
            return member

        def __str__(self) -> str:
            return str(self.value)

        def __format__(self, format_spec: str) -> str:
            return str(self.value).__format__(format_spec)

        @staticmethod
        def _generate_next_value_(
            name: str, start: int, count: int, last_values: list[str]
        ) -> str:
            return name.lower()


E = TypeVar("E", bound=Enum)


def enum_docstrings(enum: type[E]) -> type[E]:
    """Give each enum member the string literal written right below it

    Python discards those literals, so the class source is parsed and each
    one is copied onto the member's __doc__:

        @enum_docstrings
        class VolumeType(StrEnum):
            \"\"\"EBS volume types\"\"\"

            gp3 = "gp3"
            \"\"\"General purpose SSD with provisionable performance\"\"\"

        VolumeType.gp3.__doc__  # 'General purpose SSD with ...'

    When the source cannot be read the enum is returned untouched and its
    members keep the class docstring.

    Adapted from https://stackoverflow.com/a/79229811
    """
    try:
        mod = ast.parse(inspect.getsource(enum))
    except OSError:
        return enum

    if mod.body and isinstance(class_def := mod.body[0], ast.ClassDef):
        # members start out sharing the class docstring object
        unassigned = partial(is_, enum.__doc__)
        names = enum.__members__.keys()
        member: E | None = None

        for node in class_def.body:
            match node:
                case ast.Assign(targets=[ast.Name(id=name)]) if name in names:
                    member = enum[name]
                    continue

                case ast.Expr(value=ast.Constant(value=str() as docstring)) if (
                    member and unassigned(member.__doc__)
                ):
                    member.__doc__ = docstring

                case _:
                    pass

            member = None

    return enum
