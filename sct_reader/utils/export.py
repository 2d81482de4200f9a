"""
Tabular export of parsed sector and ESE files.

Each record kind becomes one pandas DataFrame; ``export_csv`` writes one CSV
file per non-empty table.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import pandas as pd

from ..models.collection import QueryableCollection
from ..models.errors import LineError
from ..models.ese import Ese
from ..models.line import LineGroup
from ..models.sector import Sector

logger = logging.getLogger(__name__)


def _line_groups_to_dataframe(groups_by_kind: Dict[str, List[LineGroup]]) -> pd.DataFrame:
    rows = []
    for kind, groups in groups_by_kind.items():
        for group in groups:
            for index, line in enumerate(group.lines):
                rows.append({
                    'kind': kind,
                    'group': group.name,
                    'index': index,
                    'start_lat': line.start.lat,
                    'start_lon': line.start.lon,
                    'end_lat': line.end.lat,
                    'end_lon': line.end.lon,
                    'colour': line.colour.to_hex() if line.colour else None,
                })
    return pd.DataFrame(rows)


def _runways_to_dataframe(sector: Sector) -> pd.DataFrame:
    rows = []
    for airport in sector.airports:
        for strip in airport.runways:
            for end in (strip.end_a, strip.end_b):
                rows.append({
                    'airport': airport.identifier,
                    'runway': str(end.identifier),
                    'heading': end.magnetic_heading.degrees,
                    'threshold_lat': end.threshold.lat,
                    'threshold_lon': end.threshold.lon,
                })
    return pd.DataFrame(rows)


def errors_to_dataframe(errors: List[LineError]) -> pd.DataFrame:
    """One row per failed line."""
    return pd.DataFrame([error.to_dict() for error in errors])


def sector_to_dataframes(sector: Sector) -> Dict[str, pd.DataFrame]:
    """
    Convert a sector into DataFrames keyed by table name.

    Tables: airports, runways, vors, ndbs, fixes, lines, regions, labels and
    errors.
    """
    regions = [
        {
            'group': group.name,
            'region': index,
            'colour': region.colour.to_hex(),
            'vertices': len(region.vertices),
        }
        for group in sector.region_groups
        for index, region in enumerate(group.regions)
    ]
    labels = [
        {
            'group': group.name,
            'name': label.name,
            'lat': label.position.lat,
            'lon': label.position.lon,
            'colour': label.colour.to_hex(),
        }
        for group in sector.label_groups
        for label in group.labels
    ]

    return {
        'airports': sector.airport_collection.to_dataframe(),
        'runways': _runways_to_dataframe(sector),
        'vors': QueryableCollection(sector.vors).to_dataframe(),
        'ndbs': QueryableCollection(sector.ndbs).to_dataframe(),
        'fixes': sector.fix_collection.to_dataframe(),
        'lines': _line_groups_to_dataframe(sector.line_groups()),
        'regions': pd.DataFrame(regions),
        'labels': pd.DataFrame(labels),
        'errors': errors_to_dataframe(sector.errors),
    }


def ese_to_dataframes(ese: Ese) -> Dict[str, pd.DataFrame]:
    """
    Convert an ESE file into DataFrames keyed by table name.

    Tables: free_text, procedures, positions and errors.
    """
    free_text = [
        {
            'group': group.name,
            'text': entry.text,
            'lat': entry.position.lat,
            'lon': entry.position.lon,
        }
        for group in ese.free_text
        for entry in group.entries
    ]
    procedures = [
        {
            'airport': airport.identifier,
            'runway': str(runway),
            'type': procedure.proc_type.value,
            'identifier': procedure.identifier,
            'route': ' '.join(procedure.route),
        }
        for airport in ese.sids_stars
        for runway, runway_procedures in sorted(airport.runways.items())
        for procedure in runway_procedures
    ]

    return {
        'free_text': pd.DataFrame(free_text),
        'procedures': pd.DataFrame(procedures),
        'positions': QueryableCollection(ese.atc_positions).to_dataframe(),
        'errors': errors_to_dataframe(ese.errors),
    }


def export_csv(
    tables: Dict[str, pd.DataFrame],
    output_dir: Union[str, Path],
    prefix: Optional[str] = None,
) -> List[Path]:
    """
    Write each non-empty table as ``[prefix_]<name>.csv``.

    Returns:
        The files written
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for name, df in tables.items():
        if df.empty:
            logger.debug(f"Skipping empty table {name}")
            continue
        filename = f"{prefix}_{name}.csv" if prefix else f"{name}.csv"
        path = output_dir / filename
        df.to_csv(path, index=False)
        written.append(path)
        logger.info(f"Wrote {len(df)} rows to {path}")
    return written
