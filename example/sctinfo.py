#!/usr/bin/env python3

import sys
import argparse
import logging
import json
from pathlib import Path

from sct_reader import EseReader, SctReader, SectorError
from sct_reader.config import ReaderConfig
from sct_reader.sources import EuroScopeSource
from sct_reader.utils import ese_to_dataframes, export_csv, sector_to_dataframes

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

class Command:
    """Command-line interface for sct_reader."""

    def __init__(self, args):
        """
        Initialize the command interface.

        Args:
            args: Command line arguments
        """
        self.args = args
        self.config = ReaderConfig.from_env()
        if args.encoding:
            self.config.encoding = args.encoding
        if args.euroscope_dir:
            self.config.euroscope_dir = args.euroscope_dir

    def run_sector(self):
        """Parse sector files and report their content."""
        reader = SctReader(self.config)
        for path in self.args.files:
            sector = reader.read_path(path)
            self._report(Path(path).name, sector.summary(), sector.errors)
            if self.args.output:
                export_csv(sector_to_dataframes(sector), self.args.output, prefix=Path(path).stem)

    def run_ese(self):
        """Parse ESE files and report their content."""
        reader = EseReader(self.config)
        for path in self.args.files:
            ese = reader.read_path(path)
            self._report(Path(path).name, ese.summary(), ese.errors)
            if self.args.output:
                export_csv(ese_to_dataframes(ese), self.args.output, prefix=Path(path).stem)

    def run_prf(self):
        """Load the sector and ESE files named by EuroScope profiles."""
        for path in self.args.files:
            result = EuroScopeSource.from_prf(path, self.config).load()
            self._report(result.sector_file.name, result.sector.summary(), result.sector.errors)
            if result.ese is not None:
                self._report(result.sector_file.with_suffix('.ese').name, result.ese.summary(), result.ese.errors)
            if self.args.output:
                prefix = result.sector_file.stem
                export_csv(sector_to_dataframes(result.sector), self.args.output, prefix=prefix)
                if result.ese is not None:
                    export_csv(ese_to_dataframes(result.ese), self.args.output, prefix=f"{prefix}_ese")

    def _report(self, name, summary, errors):
        if self.args.format == 'json':
            print(json.dumps({
                'file': name,
                'summary': summary,
                'errors': [error.to_dict() for error in errors],
            }, indent=2))
            return

        print(f'{name}')
        for key, count in summary.items():
            if count:
                print(f'  {key:<16} {count}')
        for error in errors[:self.args.max_errors]:
            print(f'  {error}')
        if len(errors) > self.args.max_errors:
            print(f'  ... {len(errors) - self.args.max_errors} more errors')

    def run(self):
        """Run the specified command."""
        getattr(self, f'run_{self.args.command}')()

def main():
    parser = argparse.ArgumentParser(description='EuroScope sector file inspection tool')
    parser.add_argument('command', help='Command to execute', choices=['sector', 'ese', 'prf'])
    parser.add_argument('files', help='Files to read', nargs='+')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')
    parser.add_argument('-e', '--encoding', help='Text encoding of the files')
    parser.add_argument('-d', '--euroscope-dir', help='EuroScope data folder used to resolve profile paths')
    parser.add_argument('--format', help='Output format (json,human)', choices=['json', 'human'], default='human')
    parser.add_argument('-o', '--output', help='Directory to export CSV tables to')
    parser.add_argument('-m', '--max-errors', help='Number of errors to print per file', type=int, default=20)

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    cmd = Command(args)
    try:
        cmd.run()
    except SectorError as e:
        logger.error(f'{e}')
        sys.exit(1)

if __name__ == '__main__':
    main()
