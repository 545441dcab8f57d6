"""Testes do UploadDriver: retry de rede e fallback foto → documento."""

from __future__ import annotations

import pytest

from app.domain.upload import UploadCategory, UpstreamFailure, UpstreamSuccess
from app.services.upload_driver import (
    GENERIC_REJECTION_REASON,
    NETWORK_ERROR_REASON,
    UploadDriver,
)
from tests.fakes.fake_telegram import (
    FakeUploadClient,
    RecordingSleep,
    accepted,
    make_file,
    photo_payload,
    rejected,
    single_media_payload,
    transport_error,
)


def _driver(client: FakeUploadClient, sleep: RecordingSleep) -> UploadDriver:
    return UploadDriver(client, max_transient_retries=2, backoff_base_seconds=1.0, sleep=sleep)


@pytest.mark.asyncio
async def test_success_on_first_attempt() -> None:
    client = FakeUploadClient(accepted(photo_payload(("XYZ", 10))))
    sleep = RecordingSleep()

    result = await _driver(client, sleep).upload(make_file(), "chat-1")

    assert isinstance(result, UpstreamSuccess)
    assert len(client.requests) == 1
    request = client.requests[0]
    assert request.category is UploadCategory.PHOTO
    assert request.operation_name == "sendPhoto"
    assert request.recipient_id == "chat-1"
    assert sleep.delays == []


@pytest.mark.asyncio
async def test_rejected_photo_falls_back_to_document() -> None:
    """Foto recusada é reenviada uma vez como documento com a mesma carga."""
    client = FakeUploadClient(
        rejected(),
        accepted(single_media_payload("document", "doc-id")),
    )
    sleep = RecordingSleep()
    file = make_file()

    result = await _driver(client, sleep).upload(file, "chat-1")

    assert isinstance(result, UpstreamSuccess)
    assert len(client.requests) == 2
    first, second = client.requests
    assert first.category is UploadCategory.PHOTO
    assert second.category is UploadCategory.DOCUMENT
    assert second.operation_name == "sendDocument"
    assert second.payload is file
    assert second.recipient_id == "chat-1"
    assert sleep.delays == []


@pytest.mark.asyncio
async def test_fallback_is_used_only_once() -> None:
    client = FakeUploadClient(rejected("photo refused"), rejected("document refused"))

    result = await _driver(client, RecordingSleep()).upload(make_file(), "chat-1")

    assert result == UpstreamFailure(reason="document refused")
    assert [r.category for r in client.requests] == [
        UploadCategory.PHOTO,
        UploadCategory.DOCUMENT,
    ]


@pytest.mark.parametrize(
    "declared_type",
    ["application/pdf", "video/mp4", "audio/ogg"],
)
@pytest.mark.asyncio
async def test_non_photo_rejection_has_no_fallback(declared_type: str) -> None:
    client = FakeUploadClient(rejected("Bad Request: file is too big"))

    result = await _driver(client, RecordingSleep()).upload(
        make_file(name="x.bin", declared_type=declared_type), "chat-1"
    )

    assert result == UpstreamFailure(reason="Bad Request: file is too big")
    assert len(client.requests) == 1


@pytest.mark.asyncio
async def test_rejection_without_description_uses_generic_reason() -> None:
    client = FakeUploadClient(rejected(None))

    result = await _driver(client, RecordingSleep()).upload(
        make_file(name="doc.pdf", declared_type="application/pdf"), "chat-1"
    )

    assert result == UpstreamFailure(reason=GENERIC_REJECTION_REASON)


@pytest.mark.asyncio
async def test_transport_errors_exhaust_retries_with_linear_backoff() -> None:
    """1 tentativa + 2 retries, com backoff de 1s e depois 2s."""
    client = FakeUploadClient(transport_error())
    sleep = RecordingSleep()

    result = await _driver(client, sleep).upload(make_file(), "chat-1")

    assert result == UpstreamFailure(reason=NETWORK_ERROR_REASON)
    assert len(client.requests) == 3
    assert sleep.delays == [1.0, 2.0]
    assert sleep.total >= 3.0
    assert all(r.category is UploadCategory.PHOTO for r in client.requests)


@pytest.mark.asyncio
async def test_transient_error_then_success_retries_same_request() -> None:
    client = FakeUploadClient(transport_error(), accepted(photo_payload(("a", 1))))
    sleep = RecordingSleep()

    result = await _driver(client, sleep).upload(make_file(), "chat-1")

    assert isinstance(result, UpstreamSuccess)
    assert client.requests[0] == client.requests[1]
    assert sleep.delays == [1.0]


@pytest.mark.asyncio
async def test_fallback_document_can_exhaust_transient_retries() -> None:
    """Fallback não reinicia nem consome o orçamento de retries de rede."""
    client = FakeUploadClient(
        rejected(),
        transport_error(),
        transport_error(),
        transport_error(),
    )
    sleep = RecordingSleep()

    result = await _driver(client, sleep).upload(make_file(), "chat-1")

    assert result == UpstreamFailure(reason=NETWORK_ERROR_REASON)
    assert len(client.requests) == 4
    assert [r.category for r in client.requests[1:]] == [UploadCategory.DOCUMENT] * 3
    assert sleep.delays == [1.0, 2.0]


@pytest.mark.asyncio
async def test_retry_then_rejection_still_falls_back() -> None:
    client = FakeUploadClient(
        transport_error(),
        rejected(),
        accepted(single_media_payload("document", "doc-id")),
    )
    sleep = RecordingSleep()

    result = await _driver(client, sleep).upload(make_file(), "chat-1")

    assert isinstance(result, UpstreamSuccess)
    assert [r.category for r in client.requests] == [
        UploadCategory.PHOTO,
        UploadCategory.PHOTO,
        UploadCategory.DOCUMENT,
    ]
    assert sleep.delays == [1.0]


@pytest.mark.asyncio
async def test_zero_retries_fails_immediately() -> None:
    client = FakeUploadClient(transport_error())
    sleep = RecordingSleep()
    driver = UploadDriver(client, max_transient_retries=0, sleep=sleep)

    result = await driver.upload(make_file(), "chat-1")

    assert result == UpstreamFailure(reason=NETWORK_ERROR_REASON)
    assert len(client.requests) == 1
    assert sleep.delays == []


@pytest.mark.asyncio
async def test_unexpected_errors_propagate() -> None:
    client = FakeUploadClient(ValueError("bot_token é obrigatório"))

    with pytest.raises(ValueError, match="bot_token"):
        await _driver(client, RecordingSleep()).upload(make_file(), "chat-1")
