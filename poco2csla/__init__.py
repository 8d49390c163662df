"""
poco2csla: CSLA business object generator for plain C# data classes
"""

__version__ = "1.0.0"
__author__ = "poco2csla Team"

from poco2csla.core.generator import GenerationOrchestrator

__all__ = ["GenerationOrchestrator"]
