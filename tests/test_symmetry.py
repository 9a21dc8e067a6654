import numpy as np
import pytest

from symmetryCadGen.structure.symmetry import SpaceGroupRecord, SymmetryOperation
from symmetryCadGen.util.errors import DataSourceError, FormatError

class Test_SymmetryOperation:
    """
    Unit Tests for SymmetryOperation Class.
    
    Tests:
    __init__ :
        shape enforcement
        
        read-only matrix
    
    fromTriplet :
        Accuracy (rotation, translation, hexagonal)
        
        Notation normalized
        
        Malformed input
    
    identity, isIdentity
    """
    
    def test_init_shape_enforcement(self):
        """ Only 4x4 matrices are accepted. """
        SymmetryOperation(np.eye(4), "x,y,z")
        with pytest.raises(FormatError):
            SymmetryOperation(np.eye(3), "x,y,z")
        with pytest.raises(FormatError):
            SymmetryOperation(np.eye(4).flatten(), "x,y,z")
        with pytest.raises(FormatError):
            SymmetryOperation([["a","b"],["c","d"]], "x,y,z")
    
    def test_matrix_is_copied(self):
        op = SymmetryOperation(np.eye(4), "x,y,z")
        mat = op.asMatrix()
        mat[0,0] = 5
        assert op.isIdentity()
    
    def test_fromTriplet_rotation_translation(self):
        op = SymmetryOperation.fromTriplet("-X,1/2+Y,-Z")
        expected = np.array([ [ -1, 0,  0, 0.0 ],
                              [  0, 1,  0, 0.5 ],
                              [  0, 0, -1, 0.0 ],
                              [  0, 0,  0, 1.0 ] ])
        assert np.allclose(op.asMatrix(), expected)
        assert op.algebraic == "-x,1/2+y,-z"
        assert np.allclose(op.translationVector, [0, 0.5, 0])
        assert np.allclose(op.pointOperator, np.diag([-1, 1, -1]))
    
    def test_fromTriplet_hexagonal(self):
        op = SymmetryOperation.fromTriplet("x-y, x, z+1/6")
        expected = np.array([ [ 1, -1, 0, 0.0 ],
                              [ 1,  0, 0, 0.0 ],
                              [ 0,  0, 1, 1.0/6.0 ],
                              [ 0,  0, 0, 1.0 ] ])
        assert np.allclose(op.asMatrix(), expected)
        assert op.algebraic == "x-y,x,z+1/6"
    
    def test_fromTriplet_malformed(self):
        with pytest.raises(ValueError):
            SymmetryOperation.fromTriplet("x,y")
        with pytest.raises(ValueError):
            SymmetryOperation.fromTriplet("x,y,")
        with pytest.raises(ValueError):
            SymmetryOperation.fromTriplet("x*y,y,z")
        with pytest.raises(ValueError):
            SymmetryOperation.fromTriplet("x,y,w")
    
    def test_identity(self):
        ident = SymmetryOperation.identity()
        assert ident.isIdentity()
        assert ident == SymmetryOperation.fromTriplet("x,y,z")
        assert not SymmetryOperation.fromTriplet("-x,-y,-z").isIdentity()

class Test_SpaceGroupRecord:
    """
    Unit Tests for SpaceGroupRecord Class.
    
    Tests:
    __init__ :
        identity-first enforcement
        
        positive index enforcement
        
        empty operation list
    
    accessors
    """
    
    def test_identity_first(self):
        ops = [SymmetryOperation.fromTriplet("-x,-y,-z"), SymmetryOperation.identity()]
        with pytest.raises(DataSourceError):
            SpaceGroupRecord(2, "P -1", "TRICLINIC", ops)
    
    def test_index_enforcement(self):
        ops = [SymmetryOperation.identity()]
        with pytest.raises(DataSourceError):
            SpaceGroupRecord(0, "P 1", "TRICLINIC", ops)
        with pytest.raises(DataSourceError):
            SpaceGroupRecord("one", "P 1", "TRICLINIC", ops)
    
    def test_empty_operations(self):
        with pytest.raises(DataSourceError):
            SpaceGroupRecord(1, "P 1", "TRICLINIC", [])
    
    def test_accessors(self):
        ops = [SymmetryOperation.identity(), SymmetryOperation.fromTriplet("-x,-y,-z")]
        sg = SpaceGroupRecord(2, "P -1", "TRICLINIC", ops)
        assert sg.index == 2
        assert sg.shortSymbol == "P -1"
        assert sg.bravaisLatticeName == "TRICLINIC"
        assert sg.symmetryCount == 2
        assert isinstance(sg.operations, tuple)
        assert "P -1" in str(sg)

class Test_fromTriplet_rejects:
    
    def test_non_triplet_characters(self):
        for bad in ("__import__('os'),y,z", "x,y,z.real", "x,y,abs(z)", "x,y,z;"):
            with pytest.raises(ValueError):
                SymmetryOperation.fromTriplet(bad)
    
    def test_non_finite(self):
        with pytest.raises(ValueError):
            SymmetryOperation.fromTriplet("x,y,1/0")
        with pytest.raises(ValueError):
            SymmetryOperation.fromTriplet("x,y,z/0")
    
    def test_decimal_translation(self):
        op = SymmetryOperation.fromTriplet("x,y,z+0.25")
        assert np.allclose(op.translationVector, [0, 0, 0.25])
