# The registry of easing curves, name -> f(progress) -> eased progress
EASING_REGISTRY = {}

def register_easing(name: str):
    def deco(fn):
        EASING_REGISTRY[name] = fn
        return fn
    return deco

def get_easing(name: str):
    if name not in EASING_REGISTRY:
        raise KeyError(f"Unknown easing '{name}'. Available: {', '.join(sorted(EASING_REGISTRY))}")
    return EASING_REGISTRY[name]
