from abyssal_watcher.secure_kms import generate_key, generate_nonce


def test_key_length():
    assert len(generate_key()) == 32


def test_nonce_length():
    assert len(generate_nonce()) == 12


def test_keys_differ():
    keys = {generate_key() for _ in range(20)}
    assert len(keys) == 20


def test_nonces_differ():
    nonces = {generate_nonce() for _ in range(20)}
    assert len(nonces) == 20