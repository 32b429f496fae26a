from __future__ import annotations

# Architectures whose layer count is not configurable by the trainer.
FIXED_DEPTHS: dict[str, int] = {
    "alexnet": 8,
    "nin": 16,
    "vgg": 22,
    "googlenet": 32,
}


def resolve_depth(architecture: str, depth: int) -> int:
    """Return the depth the trainer will actually be given.

    The caller's depth is replaced for fixed-depth architectures, even when it
    was set explicitly. resnet, densenet and unknown names keep it.
    """

    return FIXED_DEPTHS.get(architecture, depth)
