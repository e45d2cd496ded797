"""
Command-line interface for IGC Flight Log.
Converts IGC files into a CSV flight log or a KML document and reports
progress as files are converted.
"""

import logging
from typing import List, Optional

from ..config.constants import MPH_PER_KPH
from ..config.settings import settings
from ..core.converter import FlightConverter, create_converter
from ..core.flight import AnalysisOptions
from ..data.models import FileResult
from ..errors import OutputError
from ..io.csv_log import FlightLogWriter
from ..io.files import default_kml_path, get_igc_files_from_path
from ..io.kml import KMLWriter
from ..utils.events import Event, EventType, event_bus, publish_event

logger = logging.getLogger("igc_flightlog.ui.cli")


class CLI:
    """
    Command-line interface for IGC Flight Log.
    Each command returns the process exit status.
    """

    def __init__(self,
                 options: Optional[AnalysisOptions] = None,
                 max_workers: Optional[int] = None,
                 complete_only: bool = False,
                 quiet: bool = False):
        """
        Initialize the CLI.

        Args:
            options: Analysis options (default: from settings)
            max_workers: Files analyzed at once (default: from settings)
            complete_only: Leave flights without a detected landing out of the output
            quiet: Don't print per-file progress
        """
        self.converter: FlightConverter = create_converter(options, max_workers)
        self.complete_only = complete_only
        self.quiet = quiet
        logger.debug("CLI initialized")

    async def run_log(self, input_path: str, output_path: str) -> int:
        """
        Write a CSV flight log with one line per IGC file.

        Args:
            input_path: An IGC file or a directory of IGC files
            output_path: CSV file to create

        Returns:
            int: Exit status
        """
        files = self._find_files(input_path)
        if not files:
            return 0

        try:
            # Created before any file is read
            with FlightLogWriter(output_path) as writer:
                results = await self._convert(files)
                for result in self._selected(results):
                    writer.write_entry(result.summary, result.filename)
        except OutputError as e:
            logger.error(f"{e}")
            await publish_event(EventType.ERROR_OCCURRED, {'message': str(e), 'component': 'CLI'}, 'CLI')
            print(f"Error: {e}")
            return 1

        print("Log File Written!")
        return 0

    async def run_kml(self, input_path: str, output_path: Optional[str] = None) -> int:
        """
        Write a KML document with the fixes and path of every IGC file.

        Args:
            input_path: An IGC file or a directory of IGC files
            output_path: KML file to create (default: first IGC file + .kml)

        Returns:
            int: Exit status
        """
        files = self._find_files(input_path)
        if not files:
            return 0

        output_path = output_path or default_kml_path(files)
        print(output_path)

        writer = KMLWriter(output_path, speed_factor=settings.get('kml_speed_factor', MPH_PER_KPH))
        results = await self._convert(files)
        for result in self._selected(results):
            writer.add_result(result)

        try:
            writer.save()
        except OutputError as e:
            logger.error(f"{e}")
            await publish_event(EventType.ERROR_OCCURRED, {'message': str(e), 'component': 'CLI'}, 'CLI')
            print(f"Error: {e}")
            return 1

        print("KML File Written!")
        return 0

    def _find_files(self, input_path: str) -> List[str]:
        files = get_igc_files_from_path(input_path)
        if not files:
            logger.error("No IGC files on the path specified")
        return files

    def _selected(self, results: List[FileResult]) -> List[FileResult]:
        """Results that should reach the output"""
        selected = []
        for result in results:
            if not result.ok:
                continue
            if self.complete_only and not result.summary.is_complete:
                logger.warning(f"Skipping {result.filename}: no complete flight found")
                continue
            selected.append(result)
        return selected

    async def _convert(self, files: List[str]) -> List[FileResult]:
        if self.quiet:
            return await self.converter.convert_files(files)

        handlers = {
            EventType.FILE_CONVERTED: self._handle_file_converted,
            EventType.FILE_FAILED: self._handle_file_failed,
            EventType.CONVERSION_FINISHED: self._handle_finished,
        }
        async with event_bus.subscribed(handlers):
            return await self.converter.convert_files(files)

    async def _handle_file_converted(self, event: Event) -> None:
        """Handle file converted events."""
        summary = event.data.get('summary', {})
        print(f"{event.data.get('filename')}: {summary.get('state')}, "
              f"duration {summary.get('duration') or '-'}, "
              f"max altitude {summary.get('max_altitude_ft')} ft")

    async def _handle_file_failed(self, event: Event) -> None:
        """Handle file failed events."""
        print(f"{event.data.get('filename')}: could not be converted ({event.data.get('message')})")

    async def _handle_finished(self, event: Event) -> None:
        """Handle conversion finished events."""
        print(f"Converted {event.data.get('converted', 0)} files, "
              f"{event.data.get('failed', 0)} failed")


# Factory function to create a CLI instance
def create_cli(options: Optional[AnalysisOptions] = None,
               max_workers: Optional[int] = None,
               complete_only: bool = False,
               quiet: bool = False) -> CLI:
    """
    Create a new CLI instance.

    Returns:
        CLI: A new CLI instance
    """
    return CLI(options=options, max_workers=max_workers, complete_only=complete_only, quiet=quiet)
