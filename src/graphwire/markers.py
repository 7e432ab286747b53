from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any, NamedTuple, TypeVar, Union, get_args, get_origin

T = TypeVar("T")

PRIVATE = "private"
"""Tag value that asks for a fresh, unshared instance per field."""


class Inject(NamedTuple):
    """Mark a class attribute as injectable.

    Attach ``Inject`` metadata to ``typing.Annotated``. The tag selects how the
    attribute is satisfied: an empty tag shares one instance per concrete type,
    ``"private"`` creates a new instance for this attribute alone, and any other
    string names a specific object provided to the graph.

    Examples:
        .. code-block:: python

            from typing import Annotated


            class Handler:
                cache: Annotated[Cache | None, Inject()] = None
                buffer: Annotated[Buffer | None, Inject("private")] = None
                dsn: Annotated[str | None, Inject("primary dsn")] = None

    """

    tag: str = ""


if TYPE_CHECKING:
    Injected = Union[T, T]  # noqa: UP007,PYI016
    """Mark an attribute for shared, type-matched injection.

    At runtime ``Injected[T]`` becomes ``Annotated[T, Inject()]``.
    """

    Private = Union[T, T]  # noqa: UP007,PYI016
    """Mark an attribute for private injection.

    At runtime ``Private[T]`` becomes ``Annotated[T, Inject("private")]``.
    """

else:

    class Injected:
        """Mark an attribute for shared, type-matched injection.

        At runtime ``Injected[T]`` resolves to ``Annotated[T, Inject()]``.

        Examples:
            .. code-block:: python

                class Service:
                    repository: Injected[Repository | None] = None

        """

        def __class_getitem__(cls, item: T) -> Annotated[T, Inject]:
            return _with_marker(item, Inject())

    class Private:
        """Mark an attribute for private injection.

        At runtime ``Private[T]`` resolves to ``Annotated[T, Inject("private")]``.
        """

        def __class_getitem__(cls, item: T) -> Annotated[T, Inject]:
            return _with_marker(item, Inject(PRIVATE))


def _with_marker(item: Any, marker: Inject) -> Any:
    if get_origin(item) is Annotated:
        args = get_args(item)
        return _build_annotated((args[0], *args[1:], marker))
    return _build_annotated((item, marker))


def _build_annotated(params: tuple[object, ...]) -> Any:
    # Subscripting with a tuple is the same as passing each item.
    return Annotated[params]  # type: ignore[valid-type]


__all__ = ["PRIVATE", "Inject", "Injected", "Private"]
