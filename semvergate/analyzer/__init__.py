from .command import CommandAnalyzer

__all__ = ["CommandAnalyzer"]
