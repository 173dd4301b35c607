"""
Group Suite Unit Tests
Tests for sigcore/groups

Tests:
- Ed25519 constants and encodings match the standard curve
- Group law and scalar arithmetic for every suite
- Strict decoding of scalars and points
- Mod-p suite parameters and unequal encoding widths
- Registry lookup and randomness failure handling
"""
import pytest

from sigcore.groups import (
    Ed25519Group,
    GroupRegistry,
    KeyPair,
    ModPGroup,
    get_group,
    get_registry,
    list_groups,
)
from sigcore.groups.ed25519 import BASE_POINT, CURVE_ORDER, NEUTRAL_POINT
from sigcore.groups.modp import MODP_257_P, MODP_257_Q
from sigcore.schemas.errors import (
    RandomnessUnavailableException,
    UnknownGroupException,
)


class TestGroupLaw:
    """Algebraic properties that must hold in every suite."""

    def test_scalar_arithmetic_mod_order(self, group):
        """Scalar arithmetic wraps at the group order."""
        a = group.scalar(group.order - 1)
        b = group.scalar(2)

        assert (a + b) == group.scalar(1)
        assert group.scalar(group.order) == group.zero_scalar()
        assert (a * b) == group.scalar(group.order - 2)
        assert -group.scalar(1) == a

    def test_distributive_over_base(self, group):
        """(a + b) * G == a*G + b*G."""
        a = group.scalar(123456789)
        b = group.scalar(987654321)
        G = group.base()

        assert (a + b) * G == a * G + b * G

    def test_scalar_mul_associative(self, group):
        """a * (b * G) == (a * b) * G, exercising non-base multiplication."""
        a = group.scalar(3)
        b = group.scalar(7)
        G = group.base()

        assert a * (b * G) == (a * b) * G
        assert (b * G) * a == group.scalar(21) * G

    def test_neutral_is_identity(self, group):
        """Adding the neutral element changes nothing."""
        P = group.scalar(42) * group.base()

        assert P + group.neutral() == P
        assert group.neutral() + P == P
        assert group.neutral().is_neutral()
        assert not P.is_neutral()

    def test_zero_scalar_gives_neutral(self, group):
        """0 * P is the neutral element."""
        assert (group.zero_scalar() * group.base()).is_neutral()

    def test_order_annihilates_base(self, group):
        """(q - 1) * G + G is the neutral element."""
        G = group.base()
        P = group.scalar(group.order - 1) * G

        assert (P + G).is_neutral()

    def test_point_encoding_round_trip(self, group):
        """Decoding a point encoding gives back an equal point."""
        P = group.scalar(99) * group.base()
        data = P.to_bytes()

        assert len(data) == group.point_size
        assert group.point_from_bytes(data) == P
        assert bytes(P) == data

    def test_scalar_encoding_round_trip(self, group):
        """Decoding a scalar encoding gives back an equal scalar."""
        x = group.scalar(0xDEADBEEF)
        data = x.to_bytes()

        assert len(data) == group.scalar_size
        assert group.scalar_from_bytes(data) == x
        assert int(x) == 0xDEADBEEF

    def test_neutral_point_decodes(self, group):
        """The neutral encoding is a valid group element."""
        data = group.neutral().to_bytes()

        assert group.point_from_bytes(data).is_neutral()

    def test_values_are_hashable(self, group):
        """Equal scalars and points hash alike."""
        G = group.base()

        assert len({group.scalar(5), group.scalar(5)}) == 1
        assert len({group.scalar(5) * G, group.scalar(5) * G}) == 1


class TestStrictDecoding:
    """Decoders reject anything that is not a canonical element."""

    def test_scalar_wrong_length(self, group):
        with pytest.raises(ValueError, match="bytes"):
            group.scalar_from_bytes(b"\x01" * (group.scalar_size + 1))

    def test_scalar_not_reduced(self, group):
        """Scalar encodings >= order are rejected."""
        data = group.order.to_bytes(group.scalar_size, group.scalar_byteorder)

        with pytest.raises(ValueError, match="reduced"):
            group.scalar_from_bytes(data)

    def test_point_wrong_length(self, group):
        with pytest.raises(ValueError, match="bytes"):
            group.point_from_bytes(b"\x01" * (group.point_size - 1))


class TestEd25519:
    """Tests specific to the Ed25519 suite."""

    def test_constants(self, ed25519):
        """Widths and order match Ed25519."""
        assert ed25519.point_size == 32
        assert ed25519.scalar_size == 32
        assert ed25519.order == CURVE_ORDER
        assert ed25519.hash_name == "sha256"

    def test_base_point_encoding(self, ed25519):
        """The base point has the standard compressed encoding 0x58 0x66..."""
        assert ed25519.base().to_bytes() == bytes([88] + [102] * 31)
        assert BASE_POINT == bytes([88] + [102] * 31)

    def test_neutral_encoding(self, ed25519):
        assert ed25519.neutral().to_bytes() == b"\x01" + b"\x00" * 31
        assert NEUTRAL_POINT == ed25519.neutral().to_bytes()

    def test_scalar_little_endian(self, ed25519):
        """Scalars encode little-endian."""
        assert ed25519.scalar(44).to_bytes() == bytes([44] + [0] * 31)

    def test_rejects_small_order_point(self, ed25519):
        """(0, -1) has order 2 and is refused."""
        y = 2**255 - 19 - 1
        data = y.to_bytes(32, "little")

        with pytest.raises(ValueError, match="valid Ed25519 point"):
            ed25519.point_from_bytes(data)

    def test_rejects_non_canonical_point(self, ed25519):
        """A y coordinate above the field prime is refused."""
        with pytest.raises(ValueError):
            ed25519.point_from_bytes(b"\xff" * 32)

    def test_digest_reduction(self, ed25519):
        """Digests are read little-endian and reduced mod L."""
        digest = b"\xff" * 32
        expected = int.from_bytes(digest, "little") % CURVE_ORDER

        assert int(ed25519.scalar_from_digest(digest)) == expected

    def test_negation_sums_to_neutral(self, ed25519):
        """P + (-1)*P is the neutral element."""
        P = ed25519.scalar(11) * ed25519.base()
        minus_P = -ed25519.scalar(1) * P

        assert (P + minus_P).is_neutral()


class TestModP:
    """Tests specific to the mod-p suite."""

    def test_unequal_widths(self, modp_group):
        """33-byte points next to 32-byte scalars."""
        assert modp_group.point_size == 33
        assert modp_group.scalar_size == 32
        assert modp_group.order == MODP_257_Q
        assert modp_group.p == MODP_257_P

    def test_rejects_zero_and_p(self, modp_group):
        for value in (0, MODP_257_P):
            with pytest.raises(ValueError, match="range"):
                modp_group.point_from_bytes(value.to_bytes(33, "big"))

    def test_rejects_non_residue(self, modp_group):
        """p - 1 has order 2 and lies outside the subgroup."""
        data = (MODP_257_P - 1).to_bytes(33, "big")

        with pytest.raises(ValueError, match="subgroup"):
            modp_group.point_from_bytes(data)

    def test_rejects_non_safe_prime(self):
        with pytest.raises(ValueError, match="safe prime"):
            ModPGroup("bad", 23, 10, 4)

    def test_rejects_bad_generator(self):
        """22 = -1 mod 23 has order 2."""
        with pytest.raises(ValueError, match="generate"):
            ModPGroup("bad", 23, 11, 22)

    def test_custom_group(self):
        """A tiny group works end to end for arithmetic."""
        tiny = ModPGroup("tiny", 23, 11, 4)

        assert tiny.point_size == 1
        assert tiny.scalar_size == 1
        assert (tiny.scalar(11) * tiny.base()).is_neutral()
        assert tiny.scalar(2) * tiny.base() == tiny.point_from_bytes(bytes([16]))

    def test_groups_do_not_mix(self, modp_group, ed25519):
        """Values from different suites never combine or compare equal."""
        assert modp_group.scalar(1) != ed25519.scalar(1)
        with pytest.raises(TypeError):
            modp_group.scalar(1) + ed25519.scalar(1)
        with pytest.raises(TypeError):
            modp_group.scalar(1) * ed25519.base()


class TestKeyPair:
    """Tests for KeyPair derivation."""

    def test_keypair_from_int(self, group):
        keys = group.keypair(5)

        assert keys.secret == group.scalar(5)
        assert keys.public == group.scalar(5) * group.base()
        assert keys.group == group

    def test_random_keypair(self, group):
        keys = group.keypair()

        assert not keys.secret.is_zero()
        assert keys.public == keys.secret * group.base()

    def test_mismatched_keypair_rejected(self, group):
        with pytest.raises(ValueError, match="does not match"):
            KeyPair(secret=group.scalar(5), public=group.base())

    def test_secret_hidden_from_repr(self, group):
        keys = group.keypair(5)

        assert "secret" not in repr(keys)
        assert str(keys.secret) not in repr(keys.secret)


class TestRandomness:
    """Tests for random scalar generation."""

    def test_random_scalars_nonzero_and_distinct(self, group):
        values = {group.random_scalar() for _ in range(16)}

        assert len(values) == 16
        assert all(not v.is_zero() for v in values)

    def test_entropy_failure_raises(self, group, monkeypatch):
        """An OS entropy failure surfaces as RandomnessUnavailableException."""
        def failing_randbelow(n):
            raise OSError("entropy source exhausted")

        monkeypatch.setattr("sigcore.groups.base.secrets.randbelow", failing_randbelow)

        with pytest.raises(RandomnessUnavailableException) as exc_info:
            group.random_scalar()
        assert exc_info.value.code == "RANDOMNESS_UNAVAILABLE"

    def test_fresh_hash_objects(self, group):
        """new_hash never hands out shared state."""
        h1 = group.new_hash()
        h1.update(b"data")
        h2 = group.new_hash()

        assert h1 is not h2
        assert h2.digest() != h1.digest()


class TestRegistry:
    """Tests for the group registry."""

    def test_default_groups_registered(self):
        assert "ed25519" in list_groups()
        assert "modp-257-test" in list_groups()
        assert isinstance(get_group(), Ed25519Group)

    def test_unknown_group(self):
        with pytest.raises(UnknownGroupException) as exc_info:
            get_group("secp256k1")
        assert exc_info.value.details["name"] == "secp256k1"

    def test_register_and_replace(self):
        registry = GroupRegistry()
        registry.register(Ed25519Group(), description="first")

        with pytest.raises(ValueError, match="already registered"):
            registry.register(Ed25519Group())

        registry.register(Ed25519Group(), description="second", replace=True)
        assert registry.get_entry("ed25519").description == "second"
        assert len(registry) == 1

    def test_unregister(self):
        registry = GroupRegistry()
        registry.register(ModPGroup("tiny", 23, 11, 4), production=False)

        assert registry.unregister("tiny") is True
        assert registry.unregister("tiny") is False
        assert "tiny" not in registry

    def test_entry_to_dict(self):
        entry = get_registry().get_entry("modp-257-test")
        data = entry.to_dict()

        assert data["signature_size"] == 65
        assert data["production"] is False
