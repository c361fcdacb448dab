from gridslide.engine.state.state import (
    StateKey,
    blank_positions,
    deserialize,
    neighbors,
    serialize,
)

__all__ = ["StateKey", "blank_positions", "deserialize", "neighbors", "serialize"]
