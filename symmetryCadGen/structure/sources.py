"""
Adapters supplying space group reference data.

A source returns every space group setting it knows, keyed by index.
Filtering of non-standard settings is left to the caller.
"""

from symmetryCadGen.structure.symmetry import SpaceGroupRecord, SymmetryOperation
from symmetryCadGen.util.errors import DataSourceError
from symmetryCadGen.util.tracing import TraceLevel, TRACER

from abc import ABC, abstractmethod
import gemmi
import numpy as np
import pathlib
import re

class SpaceGroupSource(ABC):
    """ Abstract base class for space group reference tables """

    @abstractmethod
    def loadAll(self):
        """
        Load every space group setting known to the source.

        Returns
        -------
        records : dict
            Maps integer index to SpaceGroupRecord. Includes settings
            with index greater than 230 when the source has them.

        Raises
        ------
        DataSourceError :
            If the underlying table can not be read.
        """
        pass

    @property
    @abstractmethod
    def name(self):
        """ Short description of the table, used in trace messages. """
        pass

class GemmiSource(SpaceGroupSource):
    """
    Space group table built into the gemmi library.

    Settings are keyed by their CCP4 number; entries without a CCP4
    number are skipped. Rhombohedral groups in the hexagonal setting
    are named with a leading 'H' (e.g. 'H 3'), following CCP4.
    """

    def __init__(self, table=None):
        """
        Parameters
        ----------
        table : iterable of gemmi.SpaceGroup (optional)
            The settings to load. Defaults to gemmi.spacegroup_table().
        """
        self._table = table

    @property
    def name(self):
        return "gemmi {}".format(getattr(gemmi, "__version__", ""))

    def loadAll(self):
        table = self._table
        if table is None:
            table = gemmi.spacegroup_table()
        records = {}
        try:
            for sg in table:
                index = sg.ccp4
                if index <= 0:
                    continue
                if index in records:
                    TRACER.trace("Skipping repeated CCP4 number {} ({}).", TraceLevel.DETAIL, index, sg.xhm())
                    continue
                ops = [_operation_from_gemmi(op) for op in sg.operations()]
                # identity first
                ops.sort(key=lambda op: not op.isIdentity())
                records[index] = SpaceGroupRecord(index,
                                                  _short_symbol(sg),
                                                  sg.crystal_system_str().upper(),
                                                  ops)
        except (RuntimeError, ValueError) as err:
            raise(DataSourceError(self.name, "Unable to read gemmi space group table: {}".format(err)))
        if len(records) == 0:
            raise(DataSourceError(self.name, "gemmi space group table is empty."))
        TRACER.trace("Loaded {} space group settings from {}.", TraceLevel.READ, len(records), self.name)
        return records

def _short_symbol(sg):
    symbol = sg.hm
    if sg.ext == 'H' and symbol.startswith('R'):
        symbol = 'H' + symbol[1:]
    return symbol

def _operation_from_gemmi(op):
    matrix = np.eye(4)
    matrix[0:3,0:3] = np.array(op.rot, dtype=float) / gemmi.Op.DEN
    matrix[0:3,3] = np.array(op.tran, dtype=float) / gemmi.Op.DEN
    return SymmetryOperation(matrix, op.triplet())

# <number> <nops> <nprim> <short name> <point group> <lattice> ['<symbol>']
_SYMOP_HEADER = re.compile(r"^\s*(\d+)\s+(\d+)\s+(\d+)\s+(\S+)\s+(\S+)\s+(\S+)(?:\s+'([^']*)')?")

class SymoplibSource(SpaceGroupSource):
    """
    Space group table read from a CCP4 symop.lib file.

    The file is a sequence of groups. Each group has a header line

        14 4 4 P21/c PG2/m MONOCLINIC 'P 1 21/c 1'

    giving the group number, the number of operations, the number of
    primitive operations, the short name, the point group, the lattice
    name and, optionally, the quoted full symbol. The header is followed
    by the operations in algebraic notation, one per line (or several
    on one line separated by '*').
    """

    def __init__(self, filename):
        """
        Parameters
        ----------
        filename : str or pathlib.Path
            The symop.lib file to read.
        """
        self._path = pathlib.Path(filename)

    @property
    def name(self):
        return str(self._path)

    def loadAll(self):
        try:
            with self._path.open(mode='r') as f:
                lines = f.readlines()
        except OSError as err:
            msg = "Unable to read symop library {}: {}"
            raise(DataSourceError(self.name, msg.format(self.name, err.strerror or err)))
        records = {}
        numbered = iter(enumerate(lines, start=1))
        for lineno, line in numbered:
            if not line.strip() or line.lstrip().startswith('#'):
                continue
            match = _SYMOP_HEADER.match(line)
            if match is None:
                msg = "{}:{}: expected a space group header, got '{}'."
                raise(DataSourceError(self.name, msg.format(self.name, lineno, line.strip())))
            index = int(match.group(1))
            nops = int(match.group(2))
            symbol = match.group(7)
            if symbol is None:
                symbol = match.group(4)
            lattice = match.group(6)
            ops = self._readOperations(numbered, nops, index, lineno)
            record = SpaceGroupRecord(index, symbol, lattice, ops)
            if index in records:
                TRACER.trace("Skipping repeated space group number {} in {}.", TraceLevel.DETAIL, index, self.name)
                continue
            records[index] = record
        if len(records) == 0:
            raise(DataSourceError(self.name, "No space groups found in {}.".format(self.name)))
        TRACER.trace("Loaded {} space group settings from {}.", TraceLevel.READ, len(records), self.name)
        return records

    def _readOperations(self, numbered, nops, index, headerLine):
        ops = []
        while len(ops) < nops:
            try:
                lineno, line = next(numbered)
            except StopIteration:
                msg = "{}: space group {} (line {}) ends after {} of {} operations."
                raise(DataSourceError(self.name, msg.format(self.name, index, headerLine, len(ops), nops)))
            for triplet in line.split('*'):
                if not triplet.strip():
                    continue
                try:
                    ops.append(SymmetryOperation.fromTriplet(triplet))
                except ValueError as err:
                    msg = "{}:{}: {}"
                    raise(DataSourceError(self.name, msg.format(self.name, lineno, err)))
        if len(ops) > nops:
            msg = "{}: space group {} (line {}) lists {} operations, header declares {}."
            raise(DataSourceError(self.name, msg.format(self.name, index, headerLine, len(ops), nops)))
        return ops
