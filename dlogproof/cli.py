"""Command line demo: prove and verify knowledge of a secp256k1 secret."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from typing import List, Optional

from .config import load_config
from .context import ProofContext
from .errors import ConfigError, RandomnessUnavailable
from .nonce import sample_nonzero_scalar
from .proofs import DLogProof


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="dlogproof", description=__doc__)
    parser.add_argument("--session", default="sid", help="Session identifier (default: sid)")
    parser.add_argument(
        "--party",
        type=int,
        default=1,
        help="Numeric party identifier of the prover (default: 1)",
    )
    parser.add_argument(
        "--secret",
        help="Hex-encoded secret scalar. If omitted a random value is generated.",
    )
    parser.add_argument("--config", help="Optional JSON configuration file")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    namespace = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=namespace.log_level)

    try:
        config = load_config(namespace.config)
        context = ProofContext(session_id=namespace.session, party_id=namespace.party)
    except (ConfigError, ValueError) as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return 2

    group = config.group_impl()
    hash_fn = config.hash_fn()

    try:
        if namespace.secret:
            secret = group.scalar(int(namespace.secret, 16))
        else:
            secret = sample_nonzero_scalar(group, max_attempts=config.nonce_attempts)
    except ValueError:
        print("Secret must be hex encoded", file=sys.stderr)
        return 2
    except RandomnessUnavailable as exc:
        print(f"Could not generate a secret: {exc}", file=sys.stderr)
        return 2

    generator = group.generator()
    public_key = secret * generator

    start = time.perf_counter()
    try:
        proof = DLogProof.prove(
            context, secret, public_key, generator,
            group=group, hash_fn=hash_fn, nonce_attempts=config.nonce_attempts,
        )
    except RandomnessUnavailable as exc:
        print(f"Could not generate a proof: {exc}", file=sys.stderr)
        return 2
    prove_ms = (time.perf_counter() - start) * 1000

    start = time.perf_counter()
    verified = proof.verify(context, public_key, generator, group=group, hash_fn=hash_fn)
    verify_ms = (time.perf_counter() - start) * 1000

    payload = {
        "group": group.name,
        "session": context.session_id.decode("utf-8", "replace"),
        "party": context.party_id,
        "public_key": public_key.to_bytes().hex(),
        "proof": {
            "commitment": proof.commitment.to_bytes().hex(),
            "response": proof.response.to_bytes().hex(),
        },
        "prove_ms": round(prove_ms, 3),
        "verify_ms": round(verify_ms, 3),
        "verified": verified,
    }
    print(json.dumps(payload, indent=2))
    return 0 if verified else 1
