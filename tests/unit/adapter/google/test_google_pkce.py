"""Unit tests for PKCE utilities."""

import re
from base64 import urlsafe_b64decode, urlsafe_b64encode
from hashlib import sha256

from papertrail.adapter.google.pkce import generate_pkce_pair


class TestGeneratePkcePair:
    """Tests for generate_pkce_pair function."""

    def test_verifier_is_base64url_encoded(self):
        """Verifier should be valid base64url without padding."""
        verifier, _ = generate_pkce_pair()

        assert re.match(r"^[A-Za-z0-9_-]+$", verifier)
        assert len(urlsafe_b64decode(verifier + "==")) == 64

    def test_challenge_is_sha256_of_verifier(self):
        """Challenge should be the S256 transform of the verifier."""
        verifier, challenge = generate_pkce_pair()

        expected = (
            urlsafe_b64encode(sha256(verifier.encode("ascii")).digest())
            .rstrip(b"=")
            .decode("ascii")
        )
        assert challenge == expected

    def test_pairs_are_unique(self):
        verifiers = {generate_pkce_pair()[0] for _ in range(20)}
        assert len(verifiers) == 20
