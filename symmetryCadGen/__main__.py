# Library imports
from symmetryCadGen.generation import generate_scad_file
from symmetryCadGen.structure.sources import GemmiSource, SymoplibSource
from symmetryCadGen.util.errors import SymmetryCadError, UsageError
from symmetryCadGen.util.tracing import TraceLevel, TRACER
# Standard Library Imports
import argparse
from pathlib import Path
import sys

class _ArgumentParser(argparse.ArgumentParser):
    """ ArgumentParser raising UsageError instead of exiting. """

    def error(self, message):
        raise(UsageError(message))

def build_parser():
    parser = _ArgumentParser(prog="symmetrycad-export",
                description="Write the 230 standard space groups as OpenSCAD operator lists.")
    parser.add_argument("output", type=str, help="file to write")
    parser.add_argument("--symop", type=str, default=None,
                help="read space groups from a CCP4 symop.lib file instead of gemmi")
    trace_group = parser.add_mutually_exclusive_group()
    trace_group.add_argument("--mode","-m",choices=["silent","echo","trace","verbose","debug"])
    trace_group.add_argument("--silent","-s",action='store_true')
    trace_group.add_argument("--echo","-e", action='store_true')
    trace_group.add_argument("--trace","-t", action='store_true')
    trace_group.add_argument("--verbose","-v", action='store_true')
    trace_group.add_argument("--debug","-d", action='store_true')
    return parser

def trace_level(args):
    """ Determine trace detail level from mutually exclusive option set. """
    if args.mode is not None:
        return TraceLevel.fromMode(args.mode)
    elif args.echo:
        return TraceLevel.ECHO
    elif args.trace:
        return TraceLevel.EVENT
    elif args.verbose:
        return TraceLevel.ALL
    elif args.debug:
        return TraceLevel.DEBUG
    return TraceLevel.NONE

def main(argv=None):
    """
    Run the export from the command line.

    Returns
    -------
    status : int
        0 on success, 1 on any usage or export error.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as err:
        parser.print_usage(sys.stderr)
        print("{}: error: {}".format(parser.prog, err.message), file=sys.stderr)
        return 1
    TRACER.filterLevel = trace_level(args)
    if args.symop is not None:
        source = SymoplibSource(Path(args.symop))
    else:
        source = GemmiSource()
    try:
        count = generate_scad_file(Path(args.output), source)
    except SymmetryCadError as err:
        print("{}: error: {}".format(parser.prog, err.message), file=sys.stderr)
        return 1
    except OSError as err:
        print("{}: error: unable to write {}: {}".format(parser.prog, args.output, err.strerror or err), file=sys.stderr)
        return 1
    TRACER.trace("Exported {} space groups.", TraceLevel.EVENT, count)
    return 0

if __name__=="__main__":
    sys.exit(main())
