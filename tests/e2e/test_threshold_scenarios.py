# tests/e2e/test_threshold_scenarios.py
"""
Cenários ponta a ponta do motor de thresholds.

Cada cenário parte de um serviço recém-semeado com a taxonomia padrão,
registra a hierarquia de um mundo e verifica a resolução observada por
uma localização folha.
"""

import pytest

try:
    from dimensional_config import build_threshold_service
    from dimensional_config.core.exceptions import CycleError
    from dimensional_config.core.graph import Dimension, DimensionType
    from dimensional_config.thresholds import DangerLevel
except Exception as e:  # noqa: BLE001
    build_threshold_service = None
    CycleError = None
    Dimension = None
    DimensionType = None
    DangerLevel = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing package entrypoints. Implement:\n"
            "- src/dimensional_config/__init__.py (build_threshold_service)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def _world(svc, world_id, world_type, region_id, location_id):
    svc.register_world(world_id, world_type)
    svc.register_region(world_id, region_id)
    svc.register_location(region_id, location_id)


def test_location_inherits_world_type_override():
    """Bag End herda o limite de personagens de FANTASY (15), não o global (10)."""
    _require_imports()
    svc = build_threshold_service()
    _world(svc, "middle-earth", "FANTASY", "shire", "bag-end")

    assert svc.get_threshold("bag-end", "maxCharactersPerScene") == 15


def test_region_override_on_another_key_keeps_inheritance():
    _require_imports()
    svc = build_threshold_service()
    _world(svc, "middle-earth", "FANTASY", "shire", "bag-end")

    svc.set_threshold("REGION", "mordor", "dangerLevel", "EXTREME")
    svc.register_region("middle-earth", "mordor")
    svc.register_location("mordor", "mount-doom")

    assert svc.get_threshold("mount-doom", "dangerLevel") is DangerLevel.EXTREME
    assert svc.get_threshold("mount-doom", "maxCharactersPerScene") == 15
    assert svc.get_threshold("bag-end", "dangerLevel") is DangerLevel.MEDIUM


def test_character_limit_boundary():
    _require_imports()
    svc = build_threshold_service()
    _world(svc, "middle-earth", "FANTASY", "bree", "town-square")

    assert svc.max_characters_per_scene("town-square") == 15
    assert svc.can_add_character_to_scene("town-square", 14) is True
    assert svc.can_add_character_to_scene("town-square", 15) is False


def test_event_trigger_boundary():
    _require_imports()
    svc = build_threshold_service()
    _world(svc, "ravenloft", "HORROR", "barovia", "haunted-house")

    assert svc.event_trigger_probability("haunted-house") == pytest.approx(0.25)
    assert svc.should_trigger_event("haunted-house", 0.20) is True
    assert svc.should_trigger_event("haunted-house", 0.30) is False


def test_horror_requires_higher_confidence():
    _require_imports()
    svc = build_threshold_service()
    _world(svc, "ravenloft", "HORROR", "barovia", "haunted-house")
    _world(svc, "middle-earth", "FANTASY", "shire", "bag-end")

    assert svc.meets_confidence_threshold("haunted-house", 0.75) is False
    assert svc.meets_confidence_threshold("bag-end", 0.75) is True


def test_location_override_wins_over_everything():
    _require_imports()
    svc = build_threshold_service()
    _world(svc, "middle-earth", "FANTASY", "shire", "bag-end")

    svc.set_threshold("GLOBAL", "default", "maxCharactersPerScene", 30)
    svc.set_threshold("WORLD", "middle-earth", "maxCharactersPerScene", 25)
    svc.set_threshold("LOCATION", "bag-end", "maxCharactersPerScene", 2)

    assert svc.max_characters_per_scene("bag-end") == 2
    assert svc.can_add_character_to_scene("bag-end", 2) is False


def test_cycle_through_service_graph_leaves_resolution_intact():
    _require_imports()
    svc = build_threshold_service()
    _world(svc, "middle-earth", "FANTASY", "shire", "bag-end")

    with pytest.raises(CycleError):
        svc.graph.add_hierarchy(
            Dimension(DimensionType.LOCATION, "bag-end"),
            Dimension(DimensionType.WORLD_TYPE, "FANTASY"),
        )

    assert svc.get_threshold("bag-end", "maxCharactersPerScene") == 15
