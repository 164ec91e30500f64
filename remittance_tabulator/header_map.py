"""Output columns of the remittance table and where each one lives in the document.

Column order in exported rows follows the declaration order below.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping

from .paths import FieldPath, is_activity_level, parse_field_path

CLAIMS_PATH = ('Remittance', 'Claim')
ACTIVITIES_KEY = 'Activity'

HEADER_PATHS: Dict[str, str] = {
    'SenderID': 'Remittance.Header.SenderID',
    'ReceiverID': 'Remittance.Header.ReceiverID',
    'TransactionDate': 'Remittance.Header.TransactionDate',
    'RecordCount': 'Remittance.Header.RecordCount',
    'DispositionFlag': 'Remittance.Header.DispositionFlag',
    'PayerID': 'Remittance.Header.PayerID',
    'ClaimID': 'Remittance.Claim.{claim}.ID',
    'IDPayer': 'Remittance.Claim.{claim}.IDPayer',
    'ProviderID': 'Remittance.Claim.{claim}.ProviderID',
    'PaymentReference': 'Remittance.Claim.{claim}.PaymentReference',
    'DateSettlement': 'Remittance.Claim.{claim}.DateSettlement',
    'FacilityID': 'Remittance.Claim.{claim}.Encounter.FacilityID',
    'ActivityID': 'Remittance.Claim.{claim}.Activity.{activity}.ID',
    'Start': 'Remittance.Claim.{claim}.Activity.{activity}.Start',
    'Type': 'Remittance.Claim.{claim}.Activity.{activity}.Type',
    'Code': 'Remittance.Claim.{claim}.Activity.{activity}.Code',
    'Quantity': 'Remittance.Claim.{claim}.Activity.{activity}.Quantity',
    'Net': 'Remittance.Claim.{claim}.Activity.{activity}.Net',
    'Clinician': 'Remittance.Claim.{claim}.Activity.{activity}.Clinician',
    'Gross': 'Remittance.Claim.{claim}.Activity.{activity}.Gross',
    'PatientShare': 'Remittance.Claim.{claim}.Activity.{activity}.PatientShare',
    'PaymentAmount': 'Remittance.Claim.{claim}.Activity.{activity}.PaymentAmount',
    'DenialCode': 'Remittance.Claim.{claim}.Activity.{activity}.DenialCode',
    'Comments': 'Remittance.Claim.{claim}.Activity.{activity}.Comments',
    'PriorAuthorizationID': 'Remittance.Claim.{claim}.Activity.{activity}.PriorAuthorizationID',
}


def build_header_map(paths: Mapping[str, str]) -> Mapping[str, FieldPath]:
    return MappingProxyType({name: parse_field_path(path) for name, path in paths.items()})


def claim_level(header_map: Mapping[str, FieldPath]) -> Mapping[str, FieldPath]:
    return MappingProxyType(
        {name: path for name, path in header_map.items() if not is_activity_level(path)}
    )


HEADER_MAP = build_header_map(HEADER_PATHS)
CLAIM_LEVEL_MAP = claim_level(HEADER_MAP)
