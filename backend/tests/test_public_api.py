"""Tests for the top-level package exports and an end-to-end run."""

from __future__ import annotations

import heatload
from heatload import (
    BuildingMetadata,
    CalculationResults,
    Floor,
    HeatLoadEngine,
    HeatLoadPayload,
    MaterialCollector,
    Room,
    WallDetail,
    create_default_engine,
)


class TestExports:
    def test_all_names_importable(self) -> None:
        for name in heatload.__all__:
            assert hasattr(heatload, name), name

    def test_factory_returns_engine(self) -> None:
        assert isinstance(create_default_engine(), HeatLoadEngine)


class TestEndToEnd:
    def test_payload_json_round_trip(self) -> None:
        raw = {
            "quoteId": "Q-42",
            "building": {"constructionYear": 1965, "insulationLevel": "partial"},
            "floors": [
                {
                    "id": "eg",
                    "name": "EG",
                    "rooms": [
                        {
                            "id": "r1",
                            "name": "Schlafzimmer",
                            "area": 14,
                            "height": 2.5,
                            "targetTemperature": 18,
                            "walls": [{"id": "w1", "area": 8}],
                            "ventilation": {"roomType": "bedroom"},
                        }
                    ],
                }
            ],
        }
        payload = HeatLoadPayload.model_validate(raw)
        updated = create_default_engine().calculate_payload(payload)
        assert updated.results is not None
        restored = CalculationResults.model_validate_json(updated.results.model_dump_json(by_alias=True))
        assert restored == updated.results
        # pre1978 partial wall 1.04 W/m²K over 8 m² at 28 K, bedroom air 0.3 1/h
        load = restored.per_room_loads[0]
        assert load.transmission_loss == 0.233
        assert load.ventilation_loss == 0.1

    def test_materials_for_engine_input(self) -> None:
        floors = [Floor(id="eg", rooms=[Room(id="r1", walls=[WallDetail(id="w1", name="Wand", area=8.0)])])]
        lines = MaterialCollector().collect(floors)
        assert [line.quantity for line in lines] == [8.0]
        assert BuildingMetadata().effective_era is None
