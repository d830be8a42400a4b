from unittest.mock import MagicMock, patch

import pytest


def ddb_item(**attrs):
    """{"id": "1"} のような値を DynamoDB の S 型アイテムにする"""
    return {k: {"S": v} for k, v in attrs.items()}


@pytest.fixture
def ddb_client():
    client = MagicMock()
    with patch("ddb_export.fetcher.boto3.client", return_value=client) as factory:
        client.factory = factory
        yield client
