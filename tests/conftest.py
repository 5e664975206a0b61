import csv
import io

import pytest

from src.models import OptionsConfig
from src.sample import sample_document


def read_csv_rows(csv_text):
    """Split CSV text the way an RFC-4180 reader does"""
    return list(csv.reader(io.StringIO(csv_text)))


def read_csv_dicts(csv_text):
    return list(csv.DictReader(io.StringIO(csv_text)))


@pytest.fixture
def sample_data():
    return sample_document()


@pytest.fixture
def options():
    return OptionsConfig(handle="custom-product", title="Custom Product", tags="custom-product")


@pytest.fixture
def mixed_data():
    """Three entries: icon on first variant, no icons, icon on first variant"""
    return {
        "menuUI": [
            {
                "label": "Top Finish",
                "type": "material change",
                "options": [
                    {
                        "label": "finishes",
                        "baseMaps": [
                            {"id": "m1", "label": "Walnut", "icon": "https://example.com/walnut.png"},
                            {"id": "m2", "label": "Ash", "icon": "https://example.com/ash.png"},
                        ],
                    }
                ],
            },
            {
                "label": "Leg Style",
                "type": "model",
                "options": [
                    {"label": "Straight", "icon": None, "id": "l1"},
                    {"label": "Tapered", "icon": "https://example.com/tapered.png", "id": "l2"},
                ],
            },
            {
                "label": "Cable Tray",
                "type": "accessory",
                "options": [
                    {"label": "Included", "icon": "https://example.com/tray.png", "id": "c1"},
                ],
            },
            {
                "label": "Assembly",
                "type": "model",
                "options": [],
            },
        ]
    }
