#
# PROJECT: raytracer-core
# MODULE: raytracer_core/tuple.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import numbers

from . import float_cmp


def zero_of(sample):
    """Additive identity in the scalar type of `sample`."""
    return type(sample)(0)


def one_of(sample):
    """Multiplicative identity in the scalar type of `sample`."""
    return type(sample)(1)


class Slot:
    """
    Named alias for one slot of a fixed-width tuple.

    The descriptor holds no data of its own: every read and write is
    forwarded to `obj[index]`, so the name and the index always denote the
    same storage. `width` restricts the alias to tuples of that length.
    """
    __slots__ = ('index', 'width', 'name')

    def __init__(self, index: int, width: int):
        self.index = index
        self.width = width
        self.name = None

    def __set_name__(self, owner, name):
        self.name = name

    def _check(self, obj):
        if len(obj) != self.width:
            raise AttributeError(
                f"'{self.name}' is only defined for {self.width}-slot tuples, "
                f"not {len(obj)}-slot {type(obj).__name__}")

    def __get__(self, obj, owner=None):
        if obj is None:
            return self
        self._check(obj)
        return obj[self.index]

    def __set__(self, obj, value):
        self._check(obj)
        obj[self.index] = value


class Tuple:
    """
    Fixed-length numeric aggregate.

    The width is decided at construction and never changes. Subclasses pin
    it with DIMENSION (None means any width). Arithmetic is component-wise
    and only combines tuples of the same class and width; subclasses
    override the operators where mixing kinds is meaningful.
    """
    __slots__ = ('_data',)
    DIMENSION = None

    def __init__(self, *values):
        self._data = self._checked(values)

    @classmethod
    def _checked(cls, values):
        data = list(values)
        if not data:
            raise ValueError(f"{cls.__name__} needs at least one component")
        if cls.DIMENSION is not None and len(data) != cls.DIMENSION:
            raise ValueError(
                f"{cls.__name__} has {cls.DIMENSION} components, got {len(data)}")
        return data

    @classmethod
    def _wrap(cls, data):
        # Bypasses the subclass constructors, which add homogeneous tags.
        obj = object.__new__(cls)
        obj._data = cls._checked(data)
        return obj

    @classmethod
    def from_array(cls, values):
        """Build from an ordered sequence, taking every slot verbatim."""
        return cls._wrap(values)

    def copy(self):
        return self._wrap(self._data)

    def to_list(self) -> list:
        return list(self._data)

    def view(self):
        """Named-field view sharing this tuple's storage (widths 3 and 4)."""
        if len(self._data) == 4:
            return View4(self)
        if len(self._data) == 3:
            return RgbView(self)
        raise TypeError(f"No named view for a {len(self._data)}-slot tuple")

    def __repr__(self):
        return f"{type(self).__name__}({', '.join(repr(c) for c in self._data)})"

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(self._data)

    def _index(self, index):
        if isinstance(index, slice) or not isinstance(index, numbers.Integral):
            raise TypeError(f"{type(self).__name__} indices must be integers")
        if index < 0 or index >= len(self._data):
            raise IndexError(
                f"{type(self).__name__} index {index} out of range "
                f"for width {len(self._data)}")
        return index

    def __getitem__(self, index):
        return self._data[self._index(index)]

    def __setitem__(self, index, value):
        self._data[self._index(index)] = value

    def __eq__(self, other):
        if not isinstance(other, Tuple):
            return NotImplemented
        return type(self) is type(other) and self._data == other._data

    __hash__ = None

    def _same_kind(self, other) -> bool:
        if type(other) is not type(self):
            return False
        if len(other._data) != len(self._data):
            raise ValueError(
                f"Width mismatch: {len(self._data)} vs {len(other._data)}")
        return True

    def _zip_with(self, other, op):
        return [op(a, b) for a, b in zip(self._data, other._data)]

    def __add__(self, other):
        if not self._same_kind(other):
            return NotImplemented
        return self._wrap(self._zip_with(other, lambda a, b: a + b))

    def __sub__(self, other):
        if not self._same_kind(other):
            return NotImplemented
        return self._wrap(self._zip_with(other, lambda a, b: a - b))

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Number):
            return NotImplemented
        return self._wrap([c * scalar for c in self._data])

    def __rmul__(self, scalar):
        if not isinstance(scalar, numbers.Number):
            return NotImplemented
        return self._wrap([scalar * c for c in self._data])

    def __truediv__(self, scalar):
        if not isinstance(scalar, numbers.Number):
            return NotImplemented
        return self._wrap([c / scalar for c in self._data])

    def __neg__(self):
        return self._wrap([-c for c in self._data])

    def __iadd__(self, other):
        if not self._same_kind(other):
            return NotImplemented
        self._data[:] = self._zip_with(other, lambda a, b: a + b)
        return self

    def __isub__(self, other):
        if not self._same_kind(other):
            return NotImplemented
        self._data[:] = self._zip_with(other, lambda a, b: a - b)
        return self

    def __imul__(self, scalar):
        if not isinstance(scalar, numbers.Number):
            return NotImplemented
        self._data[:] = [c * scalar for c in self._data]
        return self

    def __itruediv__(self, scalar):
        if not isinstance(scalar, numbers.Number):
            return NotImplemented
        self._data[:] = [c / scalar for c in self._data]
        return self

    # --- Approximate equality (component-wise, all must hold) ---

    def _all_close(self, other, cmp):
        if type(other) is not type(self) or len(other) != len(self):
            return False
        return all(cmp(a, b) for a, b in zip(self._data, other._data))

    def abs_diff_eq(self, other, epsilon=float_cmp.DEFAULT_EPSILON) -> bool:
        return self._all_close(other, lambda a, b: float_cmp.abs_diff_eq(a, b, epsilon))

    def relative_eq(self, other, epsilon=float_cmp.DEFAULT_EPSILON,
                    max_relative=float_cmp.DEFAULT_MAX_RELATIVE) -> bool:
        return self._all_close(
            other, lambda a, b: float_cmp.relative_eq(a, b, epsilon, max_relative))

    def ulps_eq(self, other, epsilon=float_cmp.DEFAULT_EPSILON,
                max_ulps=float_cmp.DEFAULT_MAX_ULPS) -> bool:
        return self._all_close(
            other, lambda a, b: float_cmp.ulps_eq(a, b, epsilon, max_ulps))


class _TupleView:
    __slots__ = ('_tuple',)

    def __init__(self, target: Tuple):
        self._tuple = target

    def __len__(self):
        return len(self._tuple)

    def __getitem__(self, index):
        return self._tuple[index]

    def __setitem__(self, index, value):
        self._tuple[index] = value

    def __repr__(self):
        return f"{type(self).__name__}({self._tuple!r})"


class View4(_TupleView):
    """`x, y, z, w` names over a 4-slot tuple."""
    __slots__ = ()
    x = Slot(0, 4)
    y = Slot(1, 4)
    z = Slot(2, 4)
    w = Slot(3, 4)


class RgbView(_TupleView):
    """`r, g, b` names over a 3-slot tuple."""
    __slots__ = ()
    r = Slot(0, 3)
    g = Slot(1, 3)
    b = Slot(2, 3)
