"""
Built-in sample menuUI document (used by `main.py --sample`).
"""
import copy
import json
from typing import Any, Dict

SAMPLE_DOCUMENT: Dict[str, Any] = {
    "menuUI": [
        {
            "label": "variant change",
            "type": "material",
            "target": [
                {"model": "565-01", "part": "part1"},
                {"model": "LegA", "part": "Leg_A"}
            ],
            "options": [
                {
                    "label": "test1",
                    "slug": "OSaSgSpE3X7Kvi53pk9c-test1",
                    "baseMaps": [
                        {
                            "id": "72x0ngHaynQRJo2jZzgp",
                            "label": "Amber",
                            "slug": "72x0ngHaynQRJo2jZzgp-Amber",
                            "icon": "https://example.com/amber.png",
                            "hexCode": "#ffffff"
                        },
                        {
                            "id": "iO82Ot8ZYXk5HPNed2Ej",
                            "label": "Bitmore",
                            "slug": "iO82Ot8ZYXk5HPNed2Ej-Bitmore",
                            "icon": "https://example.com/bitmore.png",
                            "hexCode": "#ffffff"
                        }
                    ]
                }
            ]
        },
        {
            "label": "Handle Change",
            "type": "model",
            "options": [
                {
                    "label": "handle 1",
                    "icon": None,
                    "target": "565-01 Hardware 1",
                    "id": "e37d5bd0-409f-4aa3-84a0-14311e7e879d"
                },
                {
                    "label": "handle 2",
                    "icon": None,
                    "target": "565-01 Hardware 2",
                    "id": "fe2042eb-837b-41ab-9eef-b8cf20c2a074"
                }
            ],
            "visibilityConfig": {"selectionType": 0, "dependsOn": []}
        }
    ]
}


def sample_document() -> Dict[str, Any]:
    """Fresh copy of the sample so callers may modify it"""
    return copy.deepcopy(SAMPLE_DOCUMENT)


def sample_json(indent: int = 2) -> str:
    return json.dumps(SAMPLE_DOCUMENT, indent=indent)
