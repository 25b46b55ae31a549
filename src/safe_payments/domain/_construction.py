"""Guard that keeps smart-constructed types behind their ``create`` factories."""

CONSTRUCTION_KEY = object()


def ensure_factory_built(instance: object, key: object) -> None:
    if key is not CONSTRUCTION_KEY:
        name = type(instance).__name__
        raise TypeError(f"{name} can only be built through {name}.create()")
