""" Fabricated space group data shared by the tests. """

from symmetryCadGen.structure.sources import SpaceGroupSource
from symmetryCadGen.structure.symmetry import SpaceGroupRecord, SymmetryOperation

def make_record(index, symbol, lattice="TRICLINIC", triplets=()):
    ops = [SymmetryOperation.identity()]
    ops += [SymmetryOperation.fromTriplet(t) for t in triplets]
    return SpaceGroupRecord(index, symbol, lattice, ops)

def make_records(symbols):
    """ Records numbered from 1, one per symbol, identity only. """
    return { i : make_record(i, s) for i, s in enumerate(symbols, start=1) }

class FakeSource(SpaceGroupSource):
    """ Source returning fixed records, counting loads. """
    
    def __init__(self, records):
        self.records = records
        self.loads = 0
    
    @property
    def name(self):
        return "fake"
    
    def loadAll(self):
        self.loads += 1
        return dict(self.records)

SYMOP_TEXT = """\
1 1 1 P1 PG1 TRICLINIC 'P 1'
 X,Y,Z
2 2 2 P-1 PG1bar TRICLINIC 'P -1'
 X,Y,Z
 -X,-Y,-Z
4 2 2 P21 PG2 MONOCLINIC 'P 1 21 1'
 X,Y,Z
 -X,1/2+Y,-Z
1004 2 2 P1121 PG2 MONOCLINIC 'P 1 1 21'
 X,Y,Z
 -X,-Y,1/2+Z
"""
