"""Evaluation helpers: roundtrip verification, SAC and mode diffusion."""

from .roundtrip import RoundtripFailure, RoundtripResult, run_all_ciphers, run_roundtrip_tests
from .avalanche import SACResult, compute_sac
from .diffusion import mode_diffusion

__all__ = [
    "RoundtripFailure",
    "RoundtripResult",
    "run_roundtrip_tests",
    "run_all_ciphers",
    "SACResult",
    "compute_sac",
    "mode_diffusion",
]
