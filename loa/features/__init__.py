"""Feature extraction helpers for Lines of Action."""

from .observation import (
    AUX_VECTOR_SIZE,
    BOARD_CHANNELS,
    build_aux_vector,
    build_board_tensor,
    state_to_numpy,
)
from .symmetry import (
    Transform,
    all_transforms,
    apply_policy_transform,
    policy_permutation,
    transform_board,
    transform_board_tensor,
    transform_direction,
    transform_move_vector,
    transform_square,
)

__all__ = [
    "AUX_VECTOR_SIZE",
    "BOARD_CHANNELS",
    "build_board_tensor",
    "build_aux_vector",
    "state_to_numpy",
    "Transform",
    "all_transforms",
    "apply_policy_transform",
    "policy_permutation",
    "transform_board",
    "transform_board_tensor",
    "transform_direction",
    "transform_move_vector",
    "transform_square",
]
