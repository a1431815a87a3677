"""Tests for configuration loading."""

import json

import pytest

from dlogproof import ConfigError, DLogProof, ProofConfig, SECP256K1, load_config


class TestProofConfig:
    def test_defaults(self):
        config = ProofConfig()
        assert config.group == "secp256k1"
        assert config.hash_name == "sha512"
        assert config.nonce_attempts == 64
        assert config.group_impl() is SECP256K1

    def test_rejects_bad_values(self):
        with pytest.raises(ValueError):
            ProofConfig(nonce_attempts=0)
        with pytest.raises(ValueError):
            ProofConfig(hash_name="md5")

    def test_collaborators_drive_a_proof(self, context, keypair):
        x, y = keypair
        config = ProofConfig(hash_name="sha3_512")
        proof = DLogProof.prove(
            context, x, y, group=config.group_impl(), hash_fn=config.hash_fn(),
        )
        assert proof.verify(context, y, group=config.group_impl(), hash_fn=config.hash_fn())


class TestLoadConfig:
    def test_none_gives_defaults(self):
        assert load_config(None) == ProofConfig()

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "absent.json") == ProofConfig()

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == ProofConfig()

    def test_valid_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"hash_name": "blake2b", "nonce_attempts": 16}), encoding="utf-8")
        config = load_config(str(path))
        assert config.hash_name == "blake2b"
        assert config.nonce_attempts == 16

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_validation_failure(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"group": "ed25519"}), encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_non_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)
