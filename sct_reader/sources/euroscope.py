"""
Loading sector files from disk, directly or through a EuroScope profile.

A profile (.prf) is a tab separated settings file. The entries read here are

    Settings	sector	\\EGTT\\EGTT.sct
    Settings	SettingsfileSYMBOLOGY	\\EGTT\\Symbology.txt

Paths use backslashes. A leading backslash means relative to the profile's
folder; anything else is relative to the EuroScope data folder.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..config import ReaderConfig, get_config_dir, get_documents_dir
from ..models.errors import ErrorKind, SectorError
from ..models.ese import Ese
from ..models.sector import Sector
from ..parsers.ese import EseReader
from ..parsers.sct import SctReader

logger = logging.getLogger(__name__)

ESE_SUFFIX = '.ese'


@dataclass
class EuroScopeResult:
    """A sector file and its companion ESE file, if there is one."""

    sector_file: Path
    sector: Sector
    ese: Optional[Ese] = None
    prf_file: Optional[Path] = None
    symbology_file: Optional[Path] = None

    @property
    def prf_name(self) -> Optional[str]:
        return self.prf_file.stem if self.prf_file else None

    def error_count(self) -> int:
        count = len(self.sector.errors)
        if self.ese is not None:
            count += len(self.ese.errors)
        return count


def convert_es_path(
    prf_file: Union[str, Path],
    es_path: str,
    euroscope_dir: Optional[Union[str, Path]] = None,
) -> Path:
    """
    Resolve a EuroScope style path.

    Args:
        prf_file: Profile the path was read from
        es_path: Backslash separated path, e.g. ``\\EGTT\\EGTT.sct``
        euroscope_dir: EuroScope data folder, found from the user's
            directories when not given

    Returns:
        The local path (not checked for existence)
    """
    parts = es_path.strip().split('\\')
    relative = Path(*[part for part in parts if part]) if any(parts) else Path()

    if parts and parts[0] == '':
        return Path(prf_file).parent / relative

    if euroscope_dir is not None:
        return Path(euroscope_dir) / relative

    path = get_config_dir() / 'EuroScope' / relative
    if path.exists():
        return path
    return get_documents_dir() / 'EuroScope' / relative


class EuroScopeSource:
    """
    Source reading a sector file and its ESE companion.

    Example:
        result = EuroScopeSource.from_prf('UK/Belfast Combined.prf').load()
        print(result.sector.sector_info.name, result.error_count())
    """

    def __init__(
        self,
        sector_file: Union[str, Path],
        config: Optional[ReaderConfig] = None,
        prf_file: Optional[Union[str, Path]] = None,
        symbology_file: Optional[Union[str, Path]] = None,
    ):
        """
        Args:
            sector_file: Path to the .sct file
            config: Reader options
            prf_file: Profile the sector file was found through
            symbology_file: Symbology file named by the profile (not read)
        """
        self.config = config or ReaderConfig()
        self.sector_file = Path(sector_file)
        self.prf_file = Path(prf_file) if prf_file else None
        self.symbology_file = Path(symbology_file) if symbology_file else None

    @classmethod
    def from_prf(cls, prf_file: Union[str, Path], config: Optional[ReaderConfig] = None) -> 'EuroScopeSource':
        """
        Create a source from the sector file named in a profile.

        Raises:
            SectorError: IO_ERROR if the profile cannot be read,
                MISSING_METADATA if it names no sector file
        """
        config = config or ReaderConfig()
        prf_file = Path(prf_file).resolve()
        sector_file = None
        symbology_file = None

        try:
            with open(prf_file, 'r', encoding=config.encoding, errors='replace') as f:
                for line in f:
                    items = line.rstrip('\r\n').split('\t')
                    if len(items) < 3 or items[0].lower() != 'settings':
                        continue
                    setting = items[1].lower()
                    if setting == 'sector':
                        sector_file = convert_es_path(prf_file, items[2], config.euroscope_dir)
                    elif setting == 'settingsfilesymbology':
                        symbology_file = convert_es_path(prf_file, items[2], config.euroscope_dir)
        except OSError as e:
            raise SectorError(ErrorKind.IO_ERROR, str(e)) from e

        if sector_file is None:
            raise SectorError(ErrorKind.MISSING_METADATA, f"no sector file in {prf_file}")

        logger.info(f"Profile {prf_file.name} uses sector file {sector_file}")
        return cls(sector_file, config=config, prf_file=prf_file, symbology_file=symbology_file)

    @property
    def ese_file(self) -> Path:
        return self.sector_file.with_suffix(ESE_SUFFIX)

    def load(self) -> EuroScopeResult:
        """
        Read the sector file, then the ESE file next to it if present.

        Raises:
            SectorError: IO_ERROR if the sector file cannot be read
        """
        sector = SctReader(self.config).read_path(self.sector_file)
        logger.info(f"Sector {self.sector_file.name}: {sector.summary()}")

        ese = None
        if self.ese_file.exists():
            ese = EseReader(self.config).read_path(self.ese_file)
            logger.info(f"ESE {self.ese_file.name}: {ese.summary()}")
        else:
            logger.warning(f"No ESE file found next to {self.sector_file}")

        return EuroScopeResult(
            sector_file=self.sector_file,
            sector=sector,
            ese=ese,
            prf_file=self.prf_file,
            symbology_file=self.symbology_file,
        )
