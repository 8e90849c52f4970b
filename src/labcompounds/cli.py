"""
Command-line entry point.

    labcompounds match H:2 O:1
    labcompounds match H2O --as_json
    labcompounds match N:2 O:4 --only good,fair --verbose
    labcompounds find H2O2
    labcompounds table --table_csv compounds.csv

Element arguments are ``SYMBOL:COUNT`` pairs or formulas (``H2O`` expands to
H:2 and O:1).
"""

import json
import sys
from typing import List, Optional, Sequence, Union

import fire
import polars as pl
from loguru import logger

from labcompounds.compounds import (
    CompoundMatcher,
    ElementSpec,
    InvalidElementsError,
    LabCompoundsError,
    ReferenceTable,
    compound_to_dict,
    default_table,
    specs_from_formula,
    to_payload,
)
from labcompounds.df import (
    candidates_to_frame,
    filter_by_ratio_match,
    filter_by_tag,
    read_table_csv,
    table_to_frame,
)

__all__ = ["LabCompoundsCLI", "parse_element_arg", "configure_logging", "main"]

_SUMMARY_COLUMNS = ["rank", "formula", "name", "score", "ratio_match", "safety_level"]
_TABLE_COLUMNS = ["formula", "name", "elements", "state", "stability", "safety_level"]


def parse_element_arg(token: str) -> List[ElementSpec]:
    """
    Read one command-line element argument.

    Example:
        >>> parse_element_arg("Na:2")
        [ElementSpec(symbol='Na', count=2)]
        >>> parse_element_arg("CO2")
        [ElementSpec(symbol='C', count=1), ElementSpec(symbol='O', count=2)]
    """
    token = str(token).strip()
    if ":" in token:
        symbol, _, count = token.partition(":")
        try:
            value = int(count)
        except ValueError:
            raise InvalidElementsError(f"Bad count in {token!r}") from None
        if not symbol or value <= 0:
            raise InvalidElementsError(f"Bad element argument {token!r}")
        return [ElementSpec(symbol, value)]

    specs = specs_from_formula(token)
    if not specs:
        raise InvalidElementsError(f"No element symbols in {token!r}")
    return specs


def _render(df: pl.DataFrame) -> str:
    with pl.Config(tbl_hide_dataframe_shape=True, tbl_rows=-1, fmt_str_lengths=60):
        return str(df)


class LabCompoundsCLI:
    """Match elements against the compound reference table."""

    def __init__(self, table_csv: Optional[str] = None):
        self._table_path = table_csv

    def _table(self) -> ReferenceTable:
        if self._table_path:
            logger.info(f"Reading reference table from {self._table_path}")
            return read_table_csv(self._table_path)
        return default_table()

    def match(
        self,
        *elements: str,
        limit: Optional[int] = None,
        only: Optional[Union[str, Sequence[str]]] = None,
        safety: Optional[Union[str, Sequence[str]]] = None,
        as_json: bool = False,
    ) -> str:
        """
        Rank compounds for the given elements.

        ``--only good,fair`` keeps those ratioMatch buckets and
        ``--safety safe,caution`` keeps those safety levels.
        """
        specs: List[ElementSpec] = []
        for token in elements:
            specs.extend(parse_element_arg(token))

        candidates = CompoundMatcher(self._table(), max_results=limit).match(specs)
        frame = candidates_to_frame(candidates)
        if only is not None:
            frame = filter_by_ratio_match(frame, only)
        if safety is not None:
            frame = filter_by_tag(frame, "safety_level", safety)

        if as_json:
            kept = set(frame["rank"].to_list())
            candidates = [c for rank, c in enumerate(candidates, start=1) if rank in kept]
            return json.dumps(to_payload(candidates), ensure_ascii=False, indent=2)
        if frame.height == 0:
            return "No matching compounds."
        return _render(frame.select(_SUMMARY_COLUMNS))

    def find(self, formula: str) -> str:
        """Show one compound by formula."""
        compound = self._table().find(str(formula))
        if compound is None:
            raise InvalidElementsError(f"Unknown compound {formula!r}")
        return json.dumps(compound_to_dict(compound), ensure_ascii=False, indent=2)

    def table(self) -> str:
        """List the reference table."""
        return _render(table_to_frame(self._table()).select(_TABLE_COLUMNS))


def configure_logging(verbose: bool = False) -> None:
    """Send labcompounds logs to stderr; DEBUG when verbose, else WARNING."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")
    logger.enable("labcompounds")


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Console script entry point. ``--verbose`` anywhere enables debug logs."""
    args = list(sys.argv[1:] if argv is None else argv)
    verbose = "--verbose" in args
    args = [arg for arg in args if arg != "--verbose"]
    configure_logging(verbose)

    try:
        fire.Fire(LabCompoundsCLI, command=args)
    except (LabCompoundsError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
