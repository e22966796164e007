def test_import_battlecore_package() -> None:
    import importlib

    module = importlib.import_module("battlecore")
    assert module.__version__


def test_import_rng_no_side_effects() -> None:
    from battlecore.core.rng import RNG

    rng = RNG(42)
    value = rng.randint(0, 1)
    assert value in (0, 1)


def test_service_layer_exports() -> None:
    import battlecore.services as services

    for name in services.__all__:
        assert hasattr(services, name)
