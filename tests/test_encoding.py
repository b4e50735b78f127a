from monolith.functions.encoding import base64_decode, base64_encode


def test_encode():
    assert base64_encode("Hello World").result == "SGVsbG8gV29ybGQ="


def test_encode_utf8():
    assert base64_encode("é").result == "w6k="


def test_encode_empty():
    assert base64_encode("").result == ""


def test_decode():
    assert base64_decode("SGVsbG8gV29ybGQ=").result == "Hello World"


def test_decode_tolerates_whitespace_and_missing_padding():
    assert base64_decode("SGVs bG8g\nV29y bGQ").result == "Hello World"


def test_decode_invalid():
    response = base64_decode("not*base64!")
    assert response.success is False
    assert response.error_code == "DECODING_ERROR"
    assert response.to_payload()["errorCode"] == "DECODING_ERROR"


def test_decode_non_utf8_bytes_replaced():
    # 0xff is not valid UTF-8
    assert base64_decode("/w==").result == "\ufffd"
