""" Module defining classes to hold symmetry operation and space group data """

from symmetryCadGen.util.errors import DataSourceError, FormatError

import numpy as np
import re
import sympy as sym
from sympy.polys.polyerrors import BasePolynomialError

class SymmetryOperation(object):
    """
    A single crystallographic symmetry operation.

    The operation is held as the full 4x4 augmented matrix

        m11  m12  m13  v1
        m21  m22  m23  v2
        m31  m32  m33  v3
        0.0  0.0  0.0  1.0

    together with its algebraic (triplet) notation, such as '-x,y+1/2,-z'.
    Instances are read-only.
    """

    def __init__(self, matrix, algebraic):
        """
        Parameters
        ----------
        matrix : array-like
            The 4x4 augmented matrix of the operation.
        algebraic : str
            The algebraic notation of the operation, as supplied by
            the data source.

        Raises
        ------
        FormatError :
            If matrix can not be read as a 4x4 array of numbers.
        """
        try:
            mat = np.array(matrix, dtype=float)
        except (TypeError, ValueError):
            msg = "Symmetry operation matrix {!r} is not numeric."
            raise(FormatError(msg.format(matrix)))
        if not mat.shape == (4,4):
            msg = "Symmetry operation matrices must have shape (4,4), not {}."
            raise(FormatError(msg.format(mat.shape)))
        mat.flags.writeable = False
        self._matrix = mat
        self._algebraic = str(algebraic)

    @classmethod
    def identity(cls):
        return cls(np.eye(4), "x,y,z")

    @classmethod
    def fromTriplet(cls, triplet):
        """ Build an operation from its algebraic notation.

        Each of the three comma-separated components is read as a linear
        expression in x, y and z (case insensitive). Constant terms become
        the translation column, for example '1/2+X,-Y,Z+1/2'.

        Parameters
        ----------
        triplet : str
            The algebraic notation of the operation.

        Raises
        ------
        ValueError :
            If the notation does not contain three linear components, or
            a component contains anything besides x, y, z, digits and
            the characters + - / .
        """
        text = "".join(str(triplet).split()).lower()
        parts = text.split(",")
        if not len(parts) == 3:
            msg = "Symmetry operation '{}' must have 3 components, not {}."
            raise(ValueError(msg.format(triplet, len(parts))))
        x, y, z = _TRIPLET_SYMBOLS
        matrix = np.eye(4)
        for i, part in enumerate(parts):
            if _TRIPLET_COMPONENT.match(part) is None:
                msg = "Component '{}' of symmetry operation '{}' contains characters other than x, y, z, digits and + - / ."
                raise(ValueError(msg.format(part, triplet)))
            try:
                expr = sym.sympify(part, locals=_TRIPLET_LOCALS)
                poly = sym.Poly(expr, x, y, z)
                if poly.total_degree() > 1:
                    msg = "Component '{}' of symmetry operation '{}' is not linear."
                    raise(ValueError(msg.format(part, triplet)))
                row = [float(poly.coeff_monomial(s)) for s in (x, y, z)]
                row.append(float(poly.coeff_monomial(1)))
            except (sym.SympifyError, BasePolynomialError, TypeError, AttributeError,
                    SyntaxError, ZeroDivisionError):
                msg = "Unable to read component '{}' of symmetry operation '{}'."
                raise(ValueError(msg.format(part, triplet)))
            if not np.all(np.isfinite(row)):
                msg = "Component '{}' of symmetry operation '{}' is not finite."
                raise(ValueError(msg.format(part, triplet)))
            matrix[i,0:4] = row
        return cls(matrix, text)

    def asMatrix(self):
        """ The full 4x4 augmented matrix of the operation. """
        return np.array(self._matrix)

    @property
    def algebraic(self):
        """ The algebraic notation of the operation. """
        return self._algebraic

    @property
    def pointOperator(self):
        """ The 3x3 point operation component. """
        return np.array(self._matrix[0:3,0:3])

    @property
    def translationVector(self):
        """ The 3x1 translation vector of the operation. """
        return np.array(self._matrix[0:3,3])

    def isIdentity(self):
        return np.allclose(self._matrix, np.eye(4))

    def __eq__(self, other):
        if isinstance(other, SymmetryOperation):
            return np.allclose(self._matrix, other._matrix)
        return NotImplemented

    def __hash__(self):
        return hash(tuple(np.round(self._matrix, 6).flatten()))

    def __str__(self):
        return self._algebraic

    def __repr__(self):
        return "SymmetryOperation('{}')".format(self._algebraic)

STANDARD_GROUP_COUNT = 230

_TRIPLET_SYMBOLS = sym.symbols('x y z')
_TRIPLET_LOCALS = dict(zip(('x', 'y', 'z'), _TRIPLET_SYMBOLS))
_TRIPLET_COMPONENT = re.compile(r"^[xyz0-9+\-/.]+$")

class SpaceGroupRecord(object):
    """ Read-only description of one space group setting. """

    def __init__(self, index, shortSymbol, bravaisLatticeName, operations):
        """
        Initialize a new SpaceGroupRecord.

        Parameters
        ----------
        index : int, value > 0
            The space group number (1-230 for standard settings,
            larger for non-standard settings).
        shortSymbol : str
            The short Hermann-Mauguin symbol of the group.
        bravaisLatticeName : str
            The name of the lattice, as given by the data source.
        operations : iterable of SymmetryOperation
            All symmetry operations of the group. The first
            operation must be the identity.

        Raises
        ------
        DataSourceError :
            If index is not a positive integer, the group has no
            operations, or the first operation is not the identity.
        """
        try:
            self._index = int(index)
        except (TypeError, ValueError):
            raise(DataSourceError(index, "Invalid space group index {!r}.".format(index)))
        if self._index <= 0:
            raise(DataSourceError(index, "Space group index must be positive, not {}.".format(index)))
        self._short_symbol = str(shortSymbol)
        self._lattice_name = str(bravaisLatticeName)
        ops = tuple(operations)
        for op in ops:
            if not isinstance(op, SymmetryOperation):
                raise(TypeError("operations must be SymmetryOperation instances, not {}.".format(type(op).__name__)))
        if len(ops) == 0:
            msg = "Space group {} ({}) has no symmetry operations."
            raise(DataSourceError(index, msg.format(index, shortSymbol)))
        if not ops[0].isIdentity():
            msg = "First operation of space group {} ({}) is {}, not the identity."
            raise(DataSourceError(index, msg.format(index, shortSymbol, ops[0])))
        self._operations = ops

    @property
    def index(self):
        return self._index

    @property
    def shortSymbol(self):
        return self._short_symbol

    @property
    def bravaisLatticeName(self):
        return self._lattice_name

    @property
    def operations(self):
        """ Tuple of all symmetry operations, identity first. """
        return self._operations

    @property
    def symmetryCount(self):
        return len(self._operations)

    def __str__(self):
        formstr = "< SpaceGroupRecord {}: {} ({}), {} operations >"
        return formstr.format(self.index, self.shortSymbol, self.bravaisLatticeName, self.symmetryCount)
