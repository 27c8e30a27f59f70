"""Excel workbook input and output for settlement lists."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

from openpyxl import Workbook, load_workbook
from openpyxl.utils import get_column_letter

from citypop.domain.model import Settlement, SettlementStore

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from openpyxl.worksheet.worksheet import Worksheet

log = getLogger(__name__)

FIRST_DATA_ROW: Final[int] = 2
RESULTS_SHEET_TITLE: Final[str] = "Results"
HEADER: Final[tuple[str, ...]] = ("Longitude", "Latitude", "Name", "Population", "Data Source")
COORDINATE_FORMAT: Final[str] = "0.000000"
POPULATION_FORMAT: Final[str] = "#,##0"

_LONGITUDE_COLUMN = 1
_LATITUDE_COLUMN = 2
_POPULATION_COLUMN = 4
_MIN_COLUMN_WIDTH = 8
_COLUMN_PADDING = 2


def read_settlements(path: Path) -> SettlementStore:
    """Read ``[longitude, latitude, name, ...]`` rows from the first worksheet.

    The first row is a header. Rows without a name are skipped silently; rows whose
    coordinates cannot be parsed are skipped with a warning.
    """

    store = SettlementStore()
    workbook = load_workbook(path, read_only=True, data_only=True)
    try:
        sheet = workbook.worksheets[0]
        rows = sheet.iter_rows(min_row=FIRST_DATA_ROW, values_only=True)
        for row_number, row in enumerate(rows, start=FIRST_DATA_ROW):
            settlement = _parse_row(row_number, row)
            if settlement is not None:
                store.add(settlement)
    finally:
        workbook.close()

    log.info("Read %s settlements from %s", len(store), path)
    return store


def _parse_row(row_number: int, row: Sequence[object]) -> Settlement | None:
    cells = (*row, None, None, None)
    longitude_cell, latitude_cell, name_cell = cells[0], cells[1], cells[2]

    name = str(name_cell).strip() if name_cell is not None else ""
    if not name:
        return None

    try:
        longitude = parse_coordinate(longitude_cell)
    except ValueError:
        log.warning("Skipping row %s: cannot parse longitude %r", row_number, longitude_cell)
        return None
    try:
        latitude = parse_coordinate(latitude_cell)
    except ValueError:
        log.warning("Skipping row %s: cannot parse latitude %r", row_number, latitude_cell)
        return None

    try:
        settlement = Settlement(name=name, latitude=latitude, longitude=longitude)
    except ValueError as exc:
        log.warning("Skipping row %s: %s", row_number, exc)
        return None

    log.debug("Read %s (%s, %s)", settlement.name, latitude, longitude)
    return settlement


def parse_coordinate(value: object) -> float:
    """Parse a coordinate cell, accepting ``,`` as the decimal separator."""

    if isinstance(value, bool) or value is None:
        raise ValueError(f"Not a coordinate: {value!r}")
    if isinstance(value, int | float):
        return float(value)
    return float(str(value).strip().replace(",", "."))


def display_values(settlement: Settlement) -> tuple[str, str, str, str, str]:
    """Cell texts as the output workbook displays them."""

    population = f"{settlement.population:,}" if settlement.population is not None else ""
    return (
        f"{settlement.longitude:.6f}",
        f"{settlement.latitude:.6f}",
        settlement.name,
        population,
        settlement.source or "",
    )


def write_settlements(store: SettlementStore, path: Path) -> None:
    """Write one row per settlement, in store order, below a header row."""

    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        sheet = workbook.create_sheet()
    sheet.title = RESULTS_SHEET_TITLE
    sheet.append(HEADER)

    for row_number, settlement in enumerate(store, start=FIRST_DATA_ROW):
        sheet.append(
            [
                settlement.longitude,
                settlement.latitude,
                settlement.name,
                settlement.population,
                settlement.source,
            ]
        )
        sheet.cell(row=row_number, column=_LONGITUDE_COLUMN).number_format = COORDINATE_FORMAT
        sheet.cell(row=row_number, column=_LATITUDE_COLUMN).number_format = COORDINATE_FORMAT
        if settlement.population is not None:
            sheet.cell(row=row_number, column=_POPULATION_COLUMN).number_format = (
                POPULATION_FORMAT
            )

    _fit_columns(sheet, store)
    path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(path)
    log.info("Results saved to %s", path)


def _fit_columns(sheet: Worksheet, store: SettlementStore) -> None:
    widths = [len(title) for title in HEADER]
    for settlement in store:
        for column, text in enumerate(display_values(settlement)):
            widths[column] = max(widths[column], len(text))
    for column, width in enumerate(widths, start=1):
        letter = get_column_letter(column)
        sheet.column_dimensions[letter].width = max(width + _COLUMN_PADDING, _MIN_COLUMN_WIDTH)
