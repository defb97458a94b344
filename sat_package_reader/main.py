"""
SAT Package Reader - Main Entry Point
Command-line interface for inspecting downloaded packages.
"""
import argparse
import logging
import sys
from pathlib import Path

from sat_package_reader.core.exceptions import PackageReaderError
from sat_package_reader.core.readers import CfdiPackageReader, MetadataPackageReader
from sat_package_reader.reports.generator import (
    generate_csv_report,
    generate_json_report,
    generate_summary_report
)


# Configure logging
def setup_logging(verbose: bool = False, log_file: str = None):
    """Configure application logging"""
    level = logging.DEBUG if verbose else logging.INFO

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def inspect_cfdi(args):
    """Handle CFDI package command"""
    logging.info(f"Reading CFDI package: {args.package}")

    with CfdiPackageReader.create_from_file(args.package) as reader:
        snapshot = reader.to_snapshot()
        print(generate_summary_report(snapshot))

        if args.json_output:
            generate_json_report(snapshot, args.json_output)
            logging.info(f"JSON report saved: {args.json_output}")

        if args.csv_output:
            generate_csv_report(reader, args.csv_output)
            logging.info(f"CSV report saved: {args.csv_output}")

    return 0


def inspect_metadata(args):
    """Handle metadata package command"""
    logging.info(f"Reading metadata package: {args.package}")

    with MetadataPackageReader.create_from_file(args.package) as reader:
        snapshot = reader.to_snapshot()
        print(generate_summary_report(snapshot))
        print(f"Metadata Items: {len(snapshot.metadata)}")

        if args.json_output:
            generate_json_report(snapshot, args.json_output)
            logging.info(f"JSON report saved: {args.json_output}")

    return 0


def main(argv=None):
    """Main entry point"""
    parser = argparse.ArgumentParser(
        description='SAT Package Reader - Inspect packages from the SAT bulk download service'
    )

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    cfdi_parser = subparsers.add_parser('cfdi', help='Inspect a CFDI package')
    cfdi_parser.add_argument('package', type=Path, help='Path to ZIP package')
    cfdi_parser.add_argument('--json-output', help='Write JSON report to this path')
    cfdi_parser.add_argument('--csv-output', help='Write CSV report to this path')
    cfdi_parser.add_argument('--log-file', help='Also write logs to this file')
    cfdi_parser.add_argument('--verbose', '-v', action='store_true', help='Verbose logging')

    metadata_parser = subparsers.add_parser('metadata', help='Inspect a metadata package')
    metadata_parser.add_argument('package', type=Path, help='Path to ZIP package')
    metadata_parser.add_argument('--json-output', help='Write JSON report to this path')
    metadata_parser.add_argument('--log-file', help='Also write logs to this file')
    metadata_parser.add_argument('--verbose', '-v', action='store_true', help='Verbose logging')

    # Parse arguments
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.verbose, args.log_file)

    # Execute command
    try:
        if args.command == 'cfdi':
            return inspect_cfdi(args)
        elif args.command == 'metadata':
            return inspect_metadata(args)
    except PackageReaderError as e:
        logging.error(str(e))
        return 1
    except KeyboardInterrupt:
        logging.info("Operation cancelled by user")
        return 130
    except Exception as e:
        logging.exception(f"Unexpected error: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
