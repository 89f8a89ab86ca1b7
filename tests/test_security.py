from app.core.security import PREFIX_LEN, generate_api_key, hash_api_key, key_prefix, verify_api_key


def test_generated_key_carries_its_prefix():
    key = generate_api_key()
    assert key.plain.startswith("hg_")
    assert len(key.prefix) == PREFIX_LEN
    assert key_prefix(key.plain) == key.prefix


def test_hash_is_stable_and_verifiable():
    key = generate_api_key()
    assert hash_api_key(key.plain) == key.hashed
    assert verify_api_key(key.plain, key.hashed)
    assert not verify_api_key(key.plain + "x", key.hashed)


def test_key_prefix_rejects_malformed_keys():
    assert key_prefix("") is None
    assert key_prefix("hg_short") is None
    assert key_prefix("xx_abcdefgh_secret") is None
    assert key_prefix("hg_abcdefghXsecret") is None
    # underscores inside the prefix are fine
    assert key_prefix("hg_ab_cdefg_secret") == "ab_cdefg"
