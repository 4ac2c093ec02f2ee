from __future__ import annotations

from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Pass the box to `func` and return whatever it returns.

        Reads left to right: `box.map(f).into(g)` rather than `g(box.map(f))`.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function receiving the box.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            R: What `func` returned.

        Example:
        ```python
        >>> from boite import Present
        >>> Present(21).map(lambda x: x * 2).into(list)
        [42]

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Call `func` on the box for its side effects, then return the box unchanged.

        Useful to log or record an intermediate box in the middle of a chain.

        Args:
            func (Callable[Concatenate[Self, P], object]): Function receiving the box.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            Self: The same box.

        Example:
        ```python
        >>> from boite import Present
        >>> Present("foo").inspect(print).get()
        Present(foo)
        'foo'

        ```
        """
        func(self, *args, **kwargs)
        return self
