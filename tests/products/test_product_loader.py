"""Tests for the product list loader and EAN lookup."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.woocommerce.fixtures import PRODUCT_CSV
from woolabels.errors import RowParseError
from woolabels.products.csv_loader import ProductCSVLoader, parse_product_data


class TestParseProductData:
    def test_parses_rows(self) -> None:
        catalog = parse_product_data(PRODUCT_CSV)

        assert len(catalog) == 7
        assert catalog.rows[0].id == 1
        assert catalog.rows[-1].id == 24
        assert catalog.rows[0].product_name == "Mozzarella BIO 350 gr"
        assert catalog.rows[0].ean_13_vendor == "2130001004009"
        assert catalog.rows[0].price == "4,50"
        assert catalog.rows[0].net_weight == 0.0

    def test_get_by_exact_name(self) -> None:
        catalog = parse_product_data(PRODUCT_CSV)

        row = catalog.get("Mozzarella BIO 350 gr")

        assert row is not None
        assert row.ean_13_vendor == "2130001004009"
        assert catalog.get("mozzarella bio 350 gr") is None

    def test_ean_falls_back_to_own_code(self) -> None:
        catalog = parse_product_data(PRODUCT_CSV)

        ean = catalog.ean_for("GALLETTO VALLE SPLUGA ALLE ERBE DI MONTAGNA 500 g")

        assert ean == "2130022004002"

    def test_unknown_product_has_no_ean(self) -> None:
        assert parse_product_data(PRODUCT_CSV).ean_for("ANANAS") is None

    def test_empty_input(self) -> None:
        assert len(parse_product_data("")) == 0

    def test_non_numeric_department_fails(self) -> None:
        # Input
        data = PRODUCT_CSV + "25;FRUTTA;agricolo;0;5;;MELE;2,00;pezzo;4%;uno;1;;;\n"

        # Act / Assert
        with pytest.raises(RowParseError, match="department"):
            parse_product_data(data)

    def test_short_row_fails(self) -> None:
        data = PRODUCT_CSV + "25;FRUTTA\n"

        with pytest.raises(RowParseError, match="expected 15 columns"):
            parse_product_data(data)


def test_loader_reads_file(tmp_path: Path) -> None:
    csv_path = tmp_path / "prodotti.csv"
    csv_path.write_text(PRODUCT_CSV, encoding="utf-8")

    catalog = ProductCSVLoader(csv_path).load()

    assert catalog.ean_for("RISO 1 KG") == "2130003002508"
