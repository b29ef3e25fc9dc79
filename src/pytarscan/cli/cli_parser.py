from argparse import ArgumentParser, RawTextHelpFormatter

from ..core.models import ScanMode, ScanOptions
from ..pytarscan import pytarscan
from ..utils.common import get_logger, terminate, type_name, unpack_error
from ..utils.exceptions import (
    ArchiveUnavailable,
    EntriesNotFound,
    ErrorCodes,
    StreamTruncated,
    TarScanError,
    UsageError,
)


logger = get_logger()

NOT_RECOVERABLE = "Error is not recoverable: exiting now"
PREVIOUS_ERRORS = "Exiting with failure status due to previous errors"



class CliArgumentParser(ArgumentParser):
    def error(self, message):
        raise UsageError(message)



def build_parser():
    arg_parser = CliArgumentParser(
        prog="pytarscan",
        description="List or extract regular files from a ustar archive.",
        formatter_class=RawTextHelpFormatter,
    )

    arg_parser.add_argument(
        "-f", "--file",
        dest="archive_file",
        metavar="ARCHIVE",
        required=True,
        help="Archive to read."
    )

    # ─────────────── Mode (exactly one) ───────────────
    mode_group = arg_parser.add_mutually_exclusive_group(required=True)
    mode_group.add_argument(
        "-t", "--list",
        dest="mode",
        action="store_const",
        const=ScanMode.LIST,
        help="List the selected entries."
    )
    mode_group.add_argument(
        "-x", "--extract",
        dest="mode",
        action="store_const",
        const=ScanMode.EXTRACT,
        help="Extract the selected entries."
    )

    # ─────────────── Other Args ───────────────────────
    arg_parser.add_argument("-v", "--verbose", action="store_true", help="Echo entry names while extracting.")
    arg_parser.add_argument(
        "-C", "--directory",
        default=".",
        metavar="DIR",
        help="Extract into DIR instead of the current directory."
    )

    # ─────────────── Positionals ──────────────────────
    arg_parser.add_argument("names", nargs="*", help="Entry names to select (default: all).")
    return arg_parser



def parse_options(argv=None) -> ScanOptions:
    # names may sit on either side of the options, as with tar
    args = build_parser().parse_intermixed_args(argv)
    options = ScanOptions(
        archive_file=args.archive_file,
        mode=args.mode,
        verbose=args.verbose,
        names=args.names,
        directory=args.directory,
    )
    return options.validate()



def run(options: ScanOptions, output=None, log_stream=None) -> ErrorCodes:
    error = None
    error_msg = None
    trailer = None

    try:
        with pytarscan(options, output=output, log_stream=log_stream) as tar:
            tar.scan()
    except StreamTruncated as st:
        error, error_msg, trailer = st, unpack_error(st), NOT_RECOVERABLE
    except EntriesNotFound as nf:
        # the scanner has already reported each missing name
        error, trailer = nf, PREVIOUS_ERRORS
    except TarScanError as te:
        error, error_msg, trailer = te, unpack_error(te), PREVIOUS_ERRORS
    except ArchiveUnavailable as au:
        error, error_msg = au, unpack_error(au)
    except Exception as e:
        error, error_msg = e, f"{type_name(e)}: {unpack_error(e)}"

    if error is None:
        return ErrorCodes.SUCCESS

    if error_msg:
        logger.error(error_msg)
    if trailer:
        logger.error(trailer)

    return ErrorCodes.for_exception(error)



def main(argv=None) -> ErrorCodes:
    try:
        options = parse_options(argv)
    except UsageError as ue:
        logger.error(unpack_error(ue))
        return ErrorCodes.for_exception(ue)
    return run(options)



def cli_parser(argv=None):
    terminate(main(argv))
