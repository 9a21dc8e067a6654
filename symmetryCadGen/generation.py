# Project imports
from symmetryCadGen.filemanagers.scadfile import (
    indexString,
    spaceGroupString,
    writeAll )
from symmetryCadGen.structure.sources import GemmiSource
from symmetryCadGen.structure.symmetry import STANDARD_GROUP_COUNT
from symmetryCadGen.util.errors import DuplicateTokenError
from symmetryCadGen.util.tracing import TraceLevel, TRACER

# Standard Library Imports
from collections import Counter
import pathlib
import re

_WHITESPACE = re.compile(r"\s")
_STRIPPED_CHARS = re.compile(r"[()/']")

def selectStandard(records):
    """
    Return the standard-setting space groups in ascending index order.

    Parameters
    ----------
    records : dict
        Maps index to SpaceGroupRecord, as returned by
        SpaceGroupSource.loadAll().

    Returns
    -------
    groups : list of SpaceGroupRecord
        Records with index <= 230, sorted by index.
    """
    keys = sorted(k for k in records if k <= STANDARD_GROUP_COUNT)
    return [records[k] for k in keys]

def tokenize(shortSymbol):
    """
    Derive a declaration name token from a space group symbol.

    All whitespace is removed, hyphens become underscores, and the
    characters ( ) / ' are removed. Any other character is kept.

    >>> tokenize("P 1 21/c 1")
    'P121c1'
    >>> tokenize("P -1")
    'P_1'
    """
    token = _WHITESPACE.sub("", shortSymbol)
    token = token.replace("-", "_")
    token = _STRIPPED_CHARS.sub("", token)
    return token

def assertUnique(tokens):
    """
    Check that no token appears more than once.

    Parameters
    ----------
    tokens : sequence of str
        Every token of the batch.

    Raises
    ------
    DuplicateTokenError :
        If the number of distinct tokens is less than len(tokens).
    """
    tokens = list(tokens)
    if len(set(tokens)) != len(tokens):
        counts = Counter(tokens)
        repeated = [tok for tok in counts if counts[tok] > 1]
        raise(DuplicateTokenError(repeated))

def renderSpaceGroups(records):
    """
    Render the complete export text for a set of space groups.

    Non-standard settings are dropped, all tokens are generated and
    checked for uniqueness, and only then is any text produced.

    Parameters
    ----------
    records : dict
        Maps index to SpaceGroupRecord.

    Returns
    -------
    blocks : list of str
        One block per space group, followed by the index block.

    Raises
    ------
    DuplicateTokenError :
        If two groups share a token.
    FormatError :
        If any operation can not be formatted.
    """
    groups = selectStandard(records)
    TRACER.trace("Selected {} of {} space group settings.", TraceLevel.RESULT, len(groups), len(records))
    if len(groups) != STANDARD_GROUP_COUNT:
        TRACER.trace("Warning: expected {} standard space groups, found {}.",
                     TraceLevel.ECHO, STANDARD_GROUP_COUNT, len(groups))
    tokens = [tokenize(sg.shortSymbol) for sg in groups]
    assertUnique(tokens)
    blocks = [spaceGroupString(sg, tok) + "\n" for sg, tok in zip(groups, tokens)]
    blocks.append(indexString(tokens))
    return blocks

def generate_scad_file(outFile, source=None):
    """
    Export the standard space groups of source to outFile.

    Parameters
    ----------
    outFile : pathlib.Path or str
        The file to write. Existing content is replaced.
    source : SpaceGroupSource (optional)
        The reference table. Defaults to GemmiSource().

    Returns
    -------
    count : int
        The number of space groups written.
    """
    outFile = pathlib.Path(outFile)
    if source is None:
        source = GemmiSource()
    TRACER.trace("Reading space groups from {}.", TraceLevel.EVENT, source.name)
    records = source.loadAll()
    blocks = renderSpaceGroups(records)
    writeAll(outFile, blocks)
    return len(blocks) - 1
