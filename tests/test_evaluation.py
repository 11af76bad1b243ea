import logging

import pytest

from refcrypto.cipher import DES, CipherRegistry
from refcrypto.cipher.base import BlockCipher
from refcrypto.evaluation import compute_sac, roundtrip, run_all_ciphers, run_roundtrip_tests


class _BrokenCipher(BlockCipher):
    """Decrypt is not the inverse of encrypt."""

    NAME = "broken"
    KEY_SIZE = 4
    BLOCK_SIZE = 4

    def encrypt_block(self, plaintext_block, key):
        return bytes(b ^ k for b, k in zip(plaintext_block, key))

    def decrypt_block(self, ciphertext_block, key):
        return ciphertext_block


@pytest.mark.parametrize("mode", ["ECB", "CBC", "cbc"])
def test_roundtrip_des(mode):
    result = run_roundtrip_tests("des", mode, num_vectors=10, seed=3)
    assert result.is_perfect
    assert result.passed == 10
    assert result.mode == mode.upper()
    assert result.success_rate == 1.0


def test_roundtrip_reports_failures():
    reg = CipherRegistry()
    reg.register("broken", _BrokenCipher)
    result = run_roundtrip_tests("broken", "ECB", num_vectors=20, registry=reg, max_failures_recorded=3)
    assert not result.is_perfect
    assert result.failed > 0
    assert len(result.failures) <= 3
    assert result.to_dict()["cipher_name"] == "broken"


def test_roundtrip_unknown_mode():
    with pytest.raises(ValueError):
        run_roundtrip_tests("des", "OFB", num_vectors=1)


def test_roundtrip_unknown_cipher():
    with pytest.raises(KeyError):
        run_roundtrip_tests("rc4", "ECB", num_vectors=1)


def test_run_all_ciphers(caplog):
    with caplog.at_level(logging.INFO, logger="refcrypto.evaluation.roundtrip"):
        results = run_all_ciphers(num_vectors=2, seed=5)
    names = CipherRegistry().list_names()
    assert len(results) == 2 * len(names)
    assert all(r.is_perfect for r in results)
    assert "[PASS]" in caplog.text


def test_roundtrip_seed_from_settings(monkeypatch):
    monkeypatch.setenv("REFCRYPTO_GLOBAL_SEED", "77")
    assert run_roundtrip_tests("des", "ECB", num_vectors=1).seed == 77


def test_sac_des_plaintext():
    result = compute_sac(DES(), input_type="plaintext", trials=20, seed=1)
    assert result.num_input_bits == 64
    assert result.num_output_bits == 64
    assert len(result.per_input_bit_mean) == 64
    assert abs(result.global_mean - 0.5) < 0.05
    assert result.min_bit_prob > 0.3


def test_sac_des_key_parity_bits_are_inert():
    result = compute_sac(DES(), input_type="key", trials=5, seed=1)
    assert result.num_input_bits == 64
    # parity bits (every 8th bit) never affect the output
    assert result.per_input_bit_mean[7] == 0.0
    assert result.per_input_bit_mean[0] > 0.3


def test_sac_bad_input_type():
    with pytest.raises(ValueError):
        compute_sac(DES(), input_type="iv", trials=1)


def test_sac_des_passes_at_cli_trial_count():
    result = compute_sac(DES(), trials=50, seed=1337)
    assert result.passes_sac
    # deviation is taken over per-input-bit means, not individual matrix cells
    expected = sum(abs(p - 0.5) for p in result.per_input_bit_mean) / result.num_input_bits
    assert result.sac_deviation == pytest.approx(expected, abs=1e-5)
    assert "[PASS]" in result.summary()


def test_run_all_ciphers_forwards_sweep_options(monkeypatch):
    calls = []

    def fake_run(name, mode, **kwargs):
        calls.append((name, mode, kwargs))
        return roundtrip.RoundtripResult(
            cipher_name=name, mode=mode, block_size=8, key_size=8,
            total_vectors=kwargs["num_vectors"], passed=kwargs["num_vectors"], failed=0,
        )

    monkeypatch.setattr(roundtrip, "run_roundtrip_tests", fake_run)
    results = run_all_ciphers(num_vectors=2, max_blocks=80, parallel_workers=4, seed=3, modes=("CBC",))
    assert len(results) == len(CipherRegistry().list_names())
    assert all(kw["max_blocks"] == 80 for _, _, kw in calls)
    assert all(kw["parallel_workers"] == 4 for _, _, kw in calls)
    assert all(kw["seed"] == 3 for _, _, kw in calls)


def test_parallel_roundtrip_over_long_inputs():
    result = run_roundtrip_tests("des", "CBC", num_vectors=2, max_blocks=80, parallel_workers=4, seed=2)
    assert result.is_perfect
