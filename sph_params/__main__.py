"""
Read the SPH sub-model parameters of a run, report them, and optionally
write them as snapshot metadata.

    python -m sph_params params.toml --snapshot-metadata snapshot.json
"""

import argparse
import logging

from sph_params.config import load_parameters, save_used_parameters
from sph_params.errors import ParameterError
from sph_params.runtime.logging import setup_logging
from sph_params.scheme import HydroScheme, startup


logger = logging.getLogger(__name__)


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sph-params",
        description="Read, report and persist the SPH sub-model parameters of a run."
    )
    parser.add_argument(
        'params_file',
        nargs='?',
        default=None,
        help="TOML parameter file with an [SPH] section. Required unless --testing."
    )
    parser.add_argument(
        '--testing',
        action='store_true',
        help="Ignore any parameter file and use the fixed testing values."
    )
    parser.add_argument(
        '--snapshot-metadata',
        default=None,
        help="JSON file to write the hydro scheme attributes to."
    )
    parser.add_argument(
        '--used-parameters',
        default=None,
        help="TOML file to write the parameters in effect, defaults included."
    )
    parser.add_argument(
        '--log-file',
        default=None,
        help="Also write the log to this file."
    )
    return parser


def main(argv=None) -> int:
    parser = get_parser()
    args = parser.parse_args(argv)
    if args.params_file is None and not args.testing:
        parser.error("a parameter file is required unless --testing is given")

    setup_logging(log_file=args.log_file)

    if args.testing:
        scheme = HydroScheme.init_for_testing()
    else:
        try:
            params = load_parameters(args.params_file)
        except (OSError, ParameterError) as error:
            logger.critical(f"Cannot read the parameter file: {error}")
            raise SystemExit(1) from error
        scheme = startup(params)
        if args.used_parameters:
            save_used_parameters(params, args.used_parameters)
            logger.info(f"Used parameters written to {args.used_parameters}")

    scheme.report()

    if args.snapshot_metadata:
        scheme.write_snapshot_metadata(args.snapshot_metadata)
        logger.info(f"Snapshot metadata written to {args.snapshot_metadata}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
