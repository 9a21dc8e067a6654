"""
Formatting of space group data as OpenSCAD source text.

Each function returns an immutable text fragment. A complete file is
the concatenation of spaceGroupString() for every group followed by
indexString() for the full set.

The generated text relies on two functions defined by the consuming
OpenSCAD library: identity4(), returning the 4x4 identity matrix, and
wrap_ops(), which packages a list of operation matrices.
"""

from symmetryCadGen.structure.symmetry import STANDARD_GROUP_COUNT, SymmetryOperation
from symmetryCadGen.util.errors import FormatError
from symmetryCadGen.util.tracing import TraceLevel, TRACER, debug

import numpy as np
import pathlib

INDENT = "    "
INDEX_WRAP = 8
MAX_FRACTION_DIGITS = 6

__all__ = [ "formatNumber", "matrixString", "indent", "headerString",
            "declarationString", "spaceGroupString", "indexString", "writeAll" ]

def formatNumber(value):
    """
    Format one matrix element.

    The value is written in fixed point with at most 6 fractional
    digits and no trailing zeros ('0.5', '1', '0.333333'). Non-negative
    values are preceded by a single space so that they align with the
    minus sign of negative values. Zero (including -0.0) is written
    ' 0'; a negative value that rounds to zero is written '-0'.

    Parameters
    ----------
    value : float
        The number to format.

    Returns
    -------
    text : str
    """
    try:
        val = float(value)
    except (TypeError, ValueError):
        raise(FormatError("Matrix element {!r} is not a number.".format(value)))
    if not np.isfinite(val):
        raise(FormatError("Matrix element {} is not finite.".format(val)))
    if val == 0:
        val = 0.0
    s = "{:.{}f}".format(val, MAX_FRACTION_DIGITS)
    s = s.rstrip("0").rstrip(".")
    if not s.startswith("-"):
        s = " " + s
    return s

def matrixString(op):
    """
    Format a 4x4 operation matrix as a nested list literal.

    Rows are written top to bottom, each as a bracketed, comma separated
    list. Rows after the first start with a single space so that the
    nested brackets line up:

        [[ 1, 0, 0, 0],
         [ 0,-1, 0, 0.5],
         [ 0, 0, 1, 0],
         [ 0, 0, 0, 1]]

    Parameters
    ----------
    op : SymmetryOperation or array-like
        The operation to format.

    Raises
    ------
    FormatError :
        If the matrix is not 4x4.
    """
    if isinstance(op, SymmetryOperation):
        mat = op.asMatrix()
    else:
        try:
            mat = np.array(op, dtype=float)
        except (TypeError, ValueError):
            raise(FormatError("Operation {!r} is not a numeric matrix.".format(op)))
    if not mat.shape == (4,4):
        raise(FormatError("Operation matrix must have shape (4,4), not {}.".format(mat.shape)))
    rows = []
    for i in range(4):
        cells = [formatNumber(mat[i,j]) for j in range(4)]
        rows.append("[" + ",".join(cells) + "]")
    return "[" + ",\n ".join(rows) + "]"

def indent(text, prefix=INDENT):
    """ Prefix every line of text with prefix. """
    return "\n".join(prefix + line for line in text.split("\n"))

def headerString(record):
    """ The comment line introducing a space group. """
    return "// {}. {} ({})\n".format(record.index, record.shortSymbol, record.bravaisLatticeName)

def declarationString(record, token):
    """
    The declaration binding sg_{token} to the group's operation list.

    The identity (always operation 0) is written as identity4(); every
    later operation is written as a matrix literal followed by a comment
    holding its algebraic notation. The text ends with '    ]);' and no
    newline.

    Parameters
    ----------
    record : SpaceGroupRecord
        The space group to write.
    token : str
        The name token of the group, see generation.tokenize().
    """
    parts = ["sg_{} = wrap_ops(\n".format(token), INDENT + "[ identity4(),\n"]
    for op in record.operations[1:]:
        parts.append(indent(matrixString(op)))
        parts.append(", // {}\n".format(op.algebraic))
    parts.append(INDENT + "]);")
    return "".join(parts)

def spaceGroupString(record, token):
    """ Header comment and declaration for one space group. """
    debug("spaceGroupString", "rendering {} as sg_{}", record.index, token)
    return headerString(record) + declarationString(record, token)

def indexString(tokens):
    """
    The aggregate list naming every generated declaration.

    Tokens are written in the given order as sg_{token}, separated by
    ', '. After every eighth token the line is broken and the next line
    indented by four spaces. The leading comment always names the 230
    standard groups.

    Parameters
    ----------
    tokens : sequence of str
        Name tokens of all declared groups.

    Raises
    ------
    FormatError :
        If tokens is empty.
    """
    tokens = list(tokens)
    if len(tokens) == 0:
        raise(FormatError("Cannot write a space group index without any groups."))
    out = "\n// All {} space groups\n".format(STANDARD_GROUP_COUNT)
    out += "space_groups = [\n" + INDENT
    for i, token in enumerate(tokens[:-1]):
        out += "sg_" + token
        if i % INDEX_WRAP == INDEX_WRAP - 1:
            out += ",\n" + INDENT
        else:
            out += ", "
    out += "sg_" + tokens[-1]
    out += " ];\n"
    return out

def writeAll(filename, blocks):
    """
    Write text fragments to a file, replacing any existing content.

    The file is closed on every exit path. If writing fails part way,
    the incomplete file is removed before the error is raised.

    Parameters
    ----------
    filename : str or pathlib.Path
        The destination file.
    blocks : iterable of str
        Text fragments, written in order.

    Raises
    ------
    OSError :
        On any failure to open, write or close the file.
    """
    path = pathlib.Path(filename)
    opened = False
    try:
        with path.open(mode='w', encoding='utf-8', newline='\n') as outFile:
            opened = True
            for block in blocks:
                outFile.write(block)
    except OSError:
        if opened:
            TRACER.trace("Removing incomplete output file {}.", TraceLevel.ECHO, path)
            path.unlink(missing_ok=True)
        raise
    TRACER.trace("Wrote {}.", TraceLevel.EVENT, path)
