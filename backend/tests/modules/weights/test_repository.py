"""Tests for the weights repository."""

import pytest
from unittest.mock import MagicMock
from postgrest.exceptions import APIError

from modules.weights import CustomWeights, WeightsRepository
from shared.exceptions import StorageError


def create_mock_weights_row(**overrides) -> dict:
    row = {
        "id": 1,
        "user_id": 42,
        "property_type": "retail",
        "safety": 0.5,
        "trnsprt": 0.1,
        "vitalty": 0.1,
        "economc": 0.1,
        "sptl_dm": 0.1,
        "amenity": 0.1,
    }
    row.update(overrides)
    return row


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def repo(mock_db):
    return WeightsRepository(mock_db)


class TestWeightsRepository:
    def test_list_for_user(self, repo, mock_db):
        chain = mock_db.table.return_value.select.return_value.eq.return_value.order.return_value
        chain.execute.return_value.data = [
            create_mock_weights_row(property_type="office"),
            create_mock_weights_row(),
        ]

        profiles = repo.list_for_user("42")

        mock_db.table.assert_called_once_with("custom_weights")
        mock_db.table.return_value.select.return_value.eq.assert_called_once_with("user_id", "42")
        assert [p.property_type for p in profiles] == ["office", "retail"]
        assert profiles[0].user_id == "42"

    def test_upsert_uses_conflict_key(self, repo, mock_db):
        mock_db.table.return_value.upsert.return_value.execute.return_value.data = [
            create_mock_weights_row()
        ]
        weights = CustomWeights(
            user_id="42", property_type="retail",
            safety=0.5, trnsprt=0.1, vitalty=0.1, economc=0.1, sptl_dm=0.1, amenity=0.1,
        )

        saved = repo.upsert(weights)

        payload, = mock_db.table.return_value.upsert.call_args.args
        assert payload["user_id"] == "42"
        assert mock_db.table.return_value.upsert.call_args.kwargs == {
            "on_conflict": "user_id,property_type"
        }
        assert saved == weights

    def test_upsert_failure(self, repo, mock_db):
        mock_db.table.return_value.upsert.return_value.execute.side_effect = APIError(
            {"message": "permission denied"}
        )
        weights = CustomWeights(
            user_id="42", property_type="retail",
            safety=0, trnsprt=0, vitalty=0, economc=0, sptl_dm=0, amenity=0,
        )

        with pytest.raises(StorageError):
            repo.upsert(weights)
