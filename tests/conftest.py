from datetime import datetime, timezone

import pytest

from models.report_data import ReportEntry


def make_entry(client, status, **kwargs):
    return ReportEntry(client=client, status=status, **kwargs)


@pytest.fixture
def sample_payload():
    """Un día con una entrada por categoría más una sin status."""
    return [
        {"client": "alpha", "status": "Terminé", "subject": "Backup alpha", "body": "ok",
         "date": "2024-03-10T22:15:00Z", "mailLink": "https://mail.example.com/1"},
        {"client": "bravo", "status": "Échec", "subject": "Backup bravo", "body": "échec disque",
         "date": "2024-03-10T22:30:00Z"},
        {"client": "charlie", "status": "Terminé avec erreurs", "subject": "Backup charlie",
         "body": "3 fichiers ignorés", "date": "2024-03-10T23:00:00Z"},
        {"client": "delta", "status": None, "subject": "Backup delta", "body": "",
         "date": "2024-03-10T23:30:00Z"},
    ]


@pytest.fixture
def sample_entries():
    ts = datetime(2024, 3, 10, 22, 0, tzinfo=timezone.utc)
    return [
        make_entry("alpha", "Terminé", date=ts),
        make_entry("bravo", "Échec", date=ts),
        make_entry("charlie", "Terminé avec erreurs", date=ts),
        make_entry("delta", None),
    ]
