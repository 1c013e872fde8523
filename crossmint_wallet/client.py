"""Async client functions for the Crossmint custodial wallet API.

Each operation performs one HTTP request and always returns a result model;
no exception reaches the caller.

Usage:
    result = await create_wallet("email:alice@example.com", "sk_staging_...")
    if result.is_success:
        print(result.address)
    else:
        print(result.code, result.message)
"""

import asyncio
from typing import Any

import aiohttp
from loguru import logger

from crossmint_wallet.exceptions import (
    WalletClientError,
    WalletHttpError,
    WalletTransportError,
    WalletValidationError,
)
from crossmint_wallet.models import (
    API_KEY_PREFIX,
    LINKED_USER_PREFIXES,
    MPC_WALLET_TYPE,
    WalletError,
    WalletListResult,
    WalletResult,
)

BASE_URL = "https://staging.crossmint.com/api/v1-alpha2"
WALLETS_ENDPOINT = "/wallets"

CREATE_ERROR_CODE = "WALLET_CREATION_ERROR"
FETCH_ERROR_CODE = "WALLET_FETCH_ERROR"
LIST_ERROR_CODE = "WALLET_LIST_ERROR"


def _validate_linked_user(linked_user: str) -> None:
    """Require an email: or id: prefix on the linked user."""
    if not linked_user.startswith(LINKED_USER_PREFIXES):
        raise WalletValidationError(
            "linkedUser must start with 'email:' or 'id:' followed by the identifier"
        )


def _validate_api_key(api_key: str) -> None:
    """Require a non-empty key with the sk_ prefix."""
    if not api_key or not api_key.startswith(API_KEY_PREFIX):
        raise WalletValidationError("Invalid API key format")


def _headers(api_key: str) -> dict[str, str]:
    """Request headers carrying the API key."""
    return {
        "X-API-KEY": api_key,
        "Content-Type": "application/json",
    }


async def _read_error_message(response: aiohttp.ClientResponse) -> str:
    """Extract the service's error message, falling back to the status."""
    fallback = f"HTTP error! status: {response.status}"
    try:
        body = await response.json(content_type=None)
    except (aiohttp.ContentTypeError, ValueError):
        logger.debug("Unparsable error body for status {}", response.status)
        return fallback

    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return fallback


async def _send(
    session: aiohttp.ClientSession,
    method: str,
    url: str,
    api_key: str,
    payload: dict[str, Any] | None,
) -> dict[str, Any]:
    async with session.request(
        method,
        url,
        headers=_headers(api_key),
        json=payload,
    ) as response:
        if not 200 <= response.status < 300:
            message = await _read_error_message(response)
            raise WalletHttpError(message, status_code=response.status)

        try:
            body = await response.json(content_type=None)
        except (aiohttp.ContentTypeError, ValueError) as e:
            raise WalletTransportError(f"Malformed response body: {e}") from e

    if not isinstance(body, dict):
        raise WalletTransportError(
            f"Unexpected response body type: {type(body).__name__}"
        )
    return body


async def _request(
    method: str,
    path: str,
    api_key: str,
    *,
    payload: dict[str, Any] | None = None,
    session: aiohttp.ClientSession | None = None,
    base_url: str = BASE_URL,
) -> dict[str, Any]:
    """Perform a single request against the wallet service.

    Args:
        method: HTTP method.
        path: Endpoint path appended to base_url.
        api_key: Crossmint server-side API key.
        payload: JSON body, if any.
        session: Existing session to reuse. A one-shot session is opened
            and closed around the request when omitted.
        base_url: Service root URL.

    Returns:
        Parsed JSON object from the response body.

    Raises:
        WalletHttpError: On non-2xx status.
        WalletTransportError: On connection failure, timeout or bad body.
    """
    url = f"{base_url.rstrip('/')}{path}"
    logger.debug("{} {}", method, url)

    try:
        if session is not None:
            return await _send(session, method, url, api_key, payload)
        async with aiohttp.ClientSession() as own_session:
            return await _send(own_session, method, url, api_key, payload)
    except aiohttp.ClientError as e:
        raise WalletTransportError(f"Connection error: {e}") from e
    except asyncio.TimeoutError as e:
        raise WalletTransportError("Request timeout") from e


def _error_result(error: Exception, default_code: str) -> WalletError:
    """Normalize any failure into a WalletError result.

    Args:
        error: The failure raised during the operation.
        default_code: Code used when the failure carries none.

    Returns:
        WalletError with message and code set.
    """
    if isinstance(error, WalletClientError):
        return WalletError(
            message=error.message,
            code=error.code or default_code,
            status_code=getattr(error, "status_code", None),
        )
    return WalletError(message=str(error) or type(error).__name__, code=default_code)


async def create_wallet(
    linked_user: str,
    api_key: str,
    *,
    session: aiohttp.ClientSession | None = None,
    base_url: str = BASE_URL,
) -> WalletResult | WalletError:
    """Create an MPC wallet linked to a user.

    Args:
        linked_user: Owner identifier, ``email:<address>`` or ``id:<id>``.
        api_key: Crossmint API key (``sk_...``).
        session: Optional session to reuse.
        base_url: Service root URL.

    Returns:
        WalletResult with walletId and address, or WalletError
        (fallback code WALLET_CREATION_ERROR).
    """
    try:
        _validate_linked_user(linked_user)
        _validate_api_key(api_key)

        data = await _request(
            "POST",
            WALLETS_ENDPOINT,
            api_key,
            payload={"type": MPC_WALLET_TYPE, "linkedUser": linked_user},
            session=session,
            base_url=base_url,
        )
        result = WalletResult(
            wallet_id=data.get("walletId"),
            address=data.get("address"),
        )
        logger.info("Created wallet {}", result.wallet_id)
        return result

    except WalletClientError as e:
        logger.warning("Wallet creation failed: {}", e.message)
        return _error_result(e, CREATE_ERROR_CODE)
    except Exception as e:
        logger.exception("Unexpected error creating wallet")
        return _error_result(e, CREATE_ERROR_CODE)


async def get_wallet(
    wallet_id: str,
    api_key: str,
    *,
    session: aiohttp.ClientSession | None = None,
    base_url: str = BASE_URL,
) -> WalletResult | WalletError:
    """Fetch an existing wallet by id.

    The wallet id is passed to the service as-is.
    """
    try:
        data = await _request(
            "GET",
            f"{WALLETS_ENDPOINT}/{wallet_id}",
            api_key,
            session=session,
            base_url=base_url,
        )
        return WalletResult(
            wallet_id=data.get("walletId"),
            address=data.get("address"),
        )

    except WalletClientError as e:
        logger.warning("Wallet fetch failed for {}: {}", wallet_id, e.message)
        return _error_result(e, FETCH_ERROR_CODE)
    except Exception as e:
        logger.exception("Unexpected error fetching wallet {}", wallet_id)
        return _error_result(e, FETCH_ERROR_CODE)


async def list_wallets(
    api_key: str,
    *,
    session: aiohttp.ClientSession | None = None,
    base_url: str = BASE_URL,
) -> WalletListResult | WalletError:
    """List wallets visible to the API key.

    Only the first page returned by the service is included.
    """
    try:
        data = await _request(
            "GET",
            WALLETS_ENDPOINT,
            api_key,
            session=session,
            base_url=base_url,
        )
        wallets = data.get("wallets", [])
        if not isinstance(wallets, list):
            raise WalletTransportError(
                f"Unexpected wallets field type: {type(wallets).__name__}"
            )
        logger.debug("Listed {} wallets", len(wallets))
        return WalletListResult(wallets=wallets)

    except WalletClientError as e:
        logger.warning("Wallet listing failed: {}", e.message)
        return _error_result(e, LIST_ERROR_CODE)
    except Exception as e:
        logger.exception("Unexpected error listing wallets")
        return _error_result(e, LIST_ERROR_CODE)
