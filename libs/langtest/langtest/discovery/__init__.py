"""Test file discovery (Layer 3 -- depends on parser)."""

from langtest.discovery.finders import FINDERS, TestFinder, TestsDotTxt, TxtsInDir, make_finder

__all__ = ["TestFinder", "TxtsInDir", "TestsDotTxt", "FINDERS", "make_finder"]
