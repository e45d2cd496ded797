"""
Conversion pipeline for IGC Flight Log.
Turns IGC files into per-file results that output writers consume.
"""

import asyncio
import logging
import os
from typing import List, Optional, Sequence

from .flight import AnalysisOptions, FlightAnalyzer
from ..config.constants import DEFAULT_MAX_WORKERS
from ..config.settings import settings
from ..data.models import FileResult
from ..data.parser import IGCParser
from ..errors import FlightLogError
from ..utils.events import EventType, publish_event

logger = logging.getLogger("igc_flightlog.core.converter")


class FlightConverter:
    """
    Parses and analyzes IGC files.

    Each file is independent: a malformed or unreadable file becomes a
    failed FileResult and the remaining files are still converted.
    """

    def __init__(self, options: Optional[AnalysisOptions] = None, max_workers: Optional[int] = None):
        """
        Initialize the converter.

        Args:
            options: Analysis options (default: from settings)
            max_workers: Maximum number of files analyzed at once (default: from settings)
        """
        self.options = options or AnalysisOptions.from_settings()
        if max_workers is None:
            max_workers = settings.get('max_workers', DEFAULT_MAX_WORKERS)
        self.max_workers = max_workers
        if self.max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.analyzer = FlightAnalyzer(self.options)

    def convert_file(self, path: str) -> FileResult:
        """
        Parse and analyze one IGC file.

        Args:
            path: Path to the IGC file

        Returns:
            FileResult: The summary and fixes, or the error that stopped the conversion
        """
        filename = os.path.basename(path)
        try:
            flight_date, fixes = IGCParser.parse_file(path)
        except (FlightLogError, OSError) as e:
            logger.error(f"The file: {filename} could not be converted into a log entry. {e}")
            return FileResult(path=path, error=e)

        summary = self.analyzer.analyze(flight_date, fixes)
        logger.info(f"Converted {filename}: {summary.fix_count} fixes, {summary.state.value}")
        return FileResult(path=path, fixes=fixes, summary=summary)

    async def convert_files(self, paths: Sequence[str]) -> List[FileResult]:
        """
        Convert several files concurrently.

        Analysis runs in the default executor, at most `max_workers` files at
        a time. Results come back in the order of `paths` so writers produce
        the same output whatever order the files finish in.

        Args:
            paths: Paths of the IGC files

        Returns:
            List[FileResult]: One result per path, in input order
        """
        await publish_event(
            EventType.CONVERSION_STARTED,
            {'file_count': len(paths), 'options': self.options.to_dict()},
            'FlightConverter'
        )

        semaphore = asyncio.Semaphore(self.max_workers)
        loop = asyncio.get_running_loop()

        async def convert(path: str) -> FileResult:
            async with semaphore:
                result = await loop.run_in_executor(None, self.convert_file, path)

            if result.ok:
                await publish_event(
                    EventType.FILE_CONVERTED,
                    {'filename': result.filename, 'summary': result.summary.to_dict()},
                    'FlightConverter'
                )
            else:
                await publish_event(
                    EventType.FILE_FAILED,
                    {'filename': result.filename, 'message': str(result.error)},
                    'FlightConverter'
                )
            return result

        results = list(await asyncio.gather(*(convert(path) for path in paths)))

        converted = sum(1 for result in results if result.ok)
        await publish_event(
            EventType.CONVERSION_FINISHED,
            {'converted': converted, 'failed': len(results) - converted},
            'FlightConverter'
        )
        return results


# Factory function to create a converter instance
def create_converter(options: Optional[AnalysisOptions] = None,
                     max_workers: Optional[int] = None) -> FlightConverter:
    """
    Create a new converter instance.

    Returns:
        FlightConverter: A new converter
    """
    return FlightConverter(options=options, max_workers=max_workers)
