from __future__ import annotations

from luxbeam.parser.ies_parser import parse_ies_photometry, tokenise_numeric_stream

__all__ = ["parse_ies_photometry", "tokenise_numeric_stream"]
