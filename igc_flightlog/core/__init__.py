"""
Core package for IGC Flight Log.
Contains the flight analysis and the conversion pipeline.
"""

from .climb import ClimbRateCalculator
from .flight import AnalysisOptions, FlightAnalyzer, analyze_flight, compute_duration
from .converter import FlightConverter, create_converter

__all__ = [
    'ClimbRateCalculator',
    'AnalysisOptions',
    'FlightAnalyzer',
    'analyze_flight',
    'compute_duration',
    'FlightConverter',
    'create_converter'
]
