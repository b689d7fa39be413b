from abyssal_watcher.threat_detector import detect_anomaly


def test_memory_injection_detected():
    assert detect_anomaly("found memory_injection here") is True


def test_polymorphic_detected():
    assert detect_anomaly("polymorphic payload") is True


def test_combined_sample_detected():
    assert detect_anomaly("memory_injection polymorphic xor_loop shellcode") is True


def test_clean_payload():
    assert detect_anomaly("shellcode xor_loop") is False


def test_empty_payload():
    assert detect_anomaly("") is False