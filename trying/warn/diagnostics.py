"""
Diagnostics - accumulator for warnings
======================================
"""

from __future__ import annotations


class Diagnostics[W](list[W]):
    """
    Order-preserving container of warnings gathered across a batch.

    A plain list (append one / extend many, default-empty) with two
    non-mutating monoid operations on top:
    - combine: concatenation of two containers
    - tell: a copy with one more warning

    Monoid laws hold:
    - Left identity: Diagnostics().combine(x) == x
    - Right identity: x.combine(Diagnostics()) == x
    - Associativity: (x.combine(y)).combine(z) == x.combine(y.combine(z))
    """

    @staticmethod
    def of[T](*items: T) -> Diagnostics[T]:
        """Create a container holding ``items`` in order."""
        return Diagnostics[T](items)

    def combine(self, other: Diagnostics[W], /) -> Diagnostics[W]:
        """
        Concatenate two containers into a new one.

        Example:
            Diagnostics.of("a", "b").combine(Diagnostics.of("c"))  # ["a", "b", "c"]
        """
        result: Diagnostics[W] = Diagnostics(self)
        result.extend(other)
        return result

    def tell(self, item: W, /) -> Diagnostics[W]:
        """Copy with ``item`` appended; same as self.combine(Diagnostics.of(item))."""
        result: Diagnostics[W] = Diagnostics(self)
        result.append(item)
        return result

    def __repr__(self) -> str:
        return f"Diagnostics({list(self)!r})"


__all__ = ("Diagnostics",)
