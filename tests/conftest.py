import copy

import pytest

REMITTANCE = {
    "Remittance": {
        "Header": {
            "SenderID": "S1",
            "ReceiverID": "R1",
            "TransactionDate": "01/02/2024 10:00",
            "RecordCount": 2,
            "DispositionFlag": "PRODUCTION",
        },
        "Claim": [
            {
                "ID": "C1",
                "IDPayer": "P-77",
                "ProviderID": "PR1",
                "PaymentReference": "REF1",
                "DateSettlement": "05/02/2024",
                "Encounter": {"FacilityID": "F1"},
                "Activity": [
                    {"ID": "A1", "Code": "99213", "Net": 100, "PaymentAmount": 90},
                    {"ID": "A2", "Code": "85025", "Net": 50, "DenialCode": "MNEC-004"},
                ],
            },
            {
                "ID": "C2",
                "ProviderID": "PR2",
                "Activity": [],
            },
        ],
    }
}


@pytest.fixture
def remittance():
    return copy.deepcopy(REMITTANCE)


@pytest.fixture
def minimal_remittance():
    return {
        "Remittance": {
            "Header": {"SenderID": "S1"},
            "Claim": [
                {"ID": "C1", "Activity": [{"ID": "A1", "Net": 100}, {"ID": "A2", "Net": 50}]},
            ],
        }
    }
