"""
Unit tests for resource tables, routing and request resolution

Checks every operation against the published endpoint shape without
network access.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from oneinch_network.errors import (
    ConfigurationError,
    UnsupportedOperation,
    UnsupportedResource,
)
from oneinch_network.resources import ItemContext, ResourceRouter, resolve_request
from oneinch_network.types import (
    Credential,
    ItemParameters,
    OperationDescriptor,
    Placement,
    StaticParameters,
)
from oneinch_network.types.request import path, query

BASE = "https://api.1inch.dev"

# Values for every parameter name used by any table
VALUES = {
    "chainId": "1",
    "src": "0xsrc",
    "dst": "0xdst",
    "amount": "1000",
    "from": "0xfrom",
    "slippage": "0.5",
    "protocols": "UNISWAP_V3",
    "makerAsset": "0xmakerasset",
    "takerAsset": "0xtakerasset",
    "maker": "0xmaker",
    "receiver": "0xreceiver",
    "makingAmount": "10",
    "takingAmount": "20",
    "orderHash": "0xhash",
    "signature": "0xsig",
    "limit": 10,
    "offset": 5,
    "fromTokenAddress": "0xfrom_token",
    "toTokenAddress": "0xto_token",
    "walletAddress": "0xwallet",
    "address": "0xaddress",
    "addresses": "0xa1,0xa2",
    "protocolNames": "aave,compound",
    "timerange": "1month",
    "fromChainId": 1,
    "toChainId": 56,
    "txHash": "0xtx",
}

# (resource, operation, method, path, query keys, body keys)
ENDPOINTS = [
    ("swap", "getQuote", "GET", "/swap/v6.0/1/quote", ["src", "dst", "amount", "protocols"], None),
    ("swap", "getSwap", "GET", "/swap/v6.0/1/swap", ["src", "dst", "amount", "from", "slippage"], None),
    ("swap", "getTokens", "GET", "/swap/v6.0/1/tokens", [], None),
    ("swap", "getProtocols", "GET", "/swap/v6.0/1/protocols", [], None),
    ("swap", "getPresets", "GET", "/swap/v6.0/1/presets", [], None),
    ("limitOrder", "createOrder", "POST", "/orderbook/v4.0/1/order", [],
     ["makerAsset", "takerAsset", "maker", "receiver", "makingAmount", "takingAmount"]),
    ("limitOrder", "getOrder", "GET", "/orderbook/v4.0/1/order/0xhash", [], None),
    ("limitOrder", "getOrders", "GET", "/orderbook/v4.0/1/orders", ["maker", "limit", "offset"], None),
    ("limitOrder", "cancelOrder", "DELETE", "/orderbook/v4.0/1/order/0xhash", ["signature"], None),
    ("limitOrder", "getOrderBook", "GET", "/orderbook/v4.0/1/orders/book", ["makerAsset", "takerAsset"], None),
    ("fusionOrder", "createFusionOrder", "POST", "/swap/v6.0/1/fusion/orders", [],
     ["fromTokenAddress", "toTokenAddress", "amount", "walletAddress"]),
    ("fusionOrder", "getFusionOrder", "GET", "/swap/v6.0/1/fusion/orders/0xhash", [], None),
    ("fusionOrder", "getFusionOrders", "GET", "/swap/v6.0/1/fusion/orders", ["address", "limit", "offset"], None),
    ("fusionOrder", "cancelFusionOrder", "DELETE", "/swap/v6.0/1/fusion/orders/0xhash", [], ["signature"]),
    ("fusionOrder", "getFusionQuote", "GET", "/swap/v6.0/1/fusion/quoter/v1.0/quote",
     ["fromTokenAddress", "toTokenAddress", "amount"], None),
    ("portfolio", "getPortfolioOverview", "GET", "/portfolio/portfolio/v4/overview/erc20",
     ["addresses", "chainId"], None),
    ("portfolio", "getProtocolBalances", "GET", "/portfolio/portfolio/v4/overview/protocols/aave,compound",
     ["addresses", "chainId"], None),
    ("portfolio", "getValueChart", "GET", "/portfolio/portfolio/v4/general/value_chart",
     ["addresses", "chainId", "timerange"], None),
    ("portfolio", "getCurrentValue", "GET", "/portfolio/portfolio/v4/general/current_value",
     ["addresses", "chainId"], None),
    ("portfolio", "getTransactions", "GET", "/portfolio/portfolio/v4/transactions",
     ["addresses", "chainId", "limit", "offset"], None),
    ("crossChain", "getCrossChainQuote", "GET", "/cross-chain/v1.0/quote",
     ["fromChainId", "toChainId", "fromTokenAddress", "toTokenAddress", "amount"], None),
    ("crossChain", "createCrossChainSwap", "POST", "/cross-chain/v1.0/swap", [],
     ["fromChainId", "toChainId", "fromTokenAddress", "toTokenAddress", "amount", "receiver"]),
    ("crossChain", "getCrossChainStatus", "GET", "/cross-chain/v1.0/status/0xtx", ["fromChainId"], None),
    ("crossChain", "getSupportedChains", "GET", "/cross-chain/v1.0/chains", [], None),
    ("crossChain", "getCrossChainTokens", "GET", "/cross-chain/v1.0/tokens", ["chainId"], None),
]


def _context(values=None, index=0):
    return ItemContext(
        credential=Credential(api_key="test-api-key", base_url=BASE),
        index=index,
        parameters=StaticParameters(VALUES if values is None else values),
    )


def _resolve(resource, operation, values=None, index=0):
    return resolve_request(ResourceRouter.resolve(resource, operation), _context(values, index))


class TestResourceRouter:

    def test_lists_five_resources(self):
        assert sorted(ResourceRouter.list()) == sorted(
            ["swap", "limitOrder", "fusionOrder", "portfolio", "crossChain"]
        )

    def test_every_resource_has_five_operations(self):
        for resource in ResourceRouter.list():
            assert len(ResourceRouter.operations(resource)) == 5

    def test_table_covers_every_endpoint(self):
        covered = {(r, o) for r, o, *_ in ENDPOINTS}
        registered = {
            (r, o) for r in ResourceRouter.list() for o in ResourceRouter.operations(r)
        }
        assert covered == registered

    def test_unknown_resource(self):
        with pytest.raises(UnsupportedResource) as exc_info:
            ResourceRouter.resolve("staking", "getQuote")
        assert "swap" in exc_info.value.details["available"]

    def test_unknown_operation(self):
        with pytest.raises(UnsupportedOperation) as exc_info:
            ResourceRouter.resolve("swap", "cancelOrder")
        assert exc_info.value.resource == "swap"
        assert "getQuote" in exc_info.value.details["available"]

    def test_tags_are_case_sensitive(self):
        with pytest.raises(UnsupportedResource):
            ResourceRouter.get("LimitOrder")

    def test_register_rejects_mismatched_table(self):
        descriptor = OperationDescriptor("swap", "getTokens", "GET", "/x")
        with pytest.raises(ValueError):
            ResourceRouter.register("other", {"getTokens": descriptor})


class TestOperationDescriptor:

    def test_path_slots_must_match_params(self):
        with pytest.raises(ValueError):
            OperationDescriptor("swap", "broken", "GET", "/swap/{chainId}/x", (query("chainId"),))

    def test_method_is_uppercased(self):
        descriptor = OperationDescriptor("swap", "x", "get", "/{chainId}", (path("chainId"),))
        assert descriptor.method == "GET"
        assert descriptor.is_read
        assert str(descriptor) == "GET /{chainId}"

    def test_placement_views(self):
        descriptor = ResourceRouter.resolve("fusionOrder", "cancelFusionOrder")
        assert [p.name for p in descriptor.path_params] == ["chainId", "orderHash"]
        assert [p.name for p in descriptor.body_params] == ["signature"]
        assert descriptor.query_params == ()
        assert descriptor.has_body
        assert descriptor.params[0].placement is Placement.PATH


@pytest.mark.parametrize("resource,operation,method,url_path,query_keys,body_keys", ENDPOINTS)
def test_endpoint_shape(resource, operation, method, url_path, query_keys, body_keys):
    """Every operation resolves to its published method, path and field placement"""
    request = _resolve(resource, operation)

    assert request.method == method
    assert request.url == BASE + url_path
    assert list(request.params.keys()) == query_keys
    for key in query_keys:
        assert request.params[key] == VALUES[key]

    if body_keys is None:
        assert request.body is None
    else:
        assert list(request.body.keys()) == body_keys
        for key in body_keys:
            assert request.body[key] == VALUES[key]


@pytest.mark.parametrize("resource,operation,method,url_path,query_keys,body_keys", ENDPOINTS)
def test_headers(resource, operation, method, url_path, query_keys, body_keys):
    request = _resolve(resource, operation)

    assert request.headers["Authorization"] == "Bearer test-api-key"
    if method == "GET":
        assert request.headers["accept"] == "application/json"
    else:
        assert "accept" not in request.headers
    if body_keys:
        assert request.headers["Content-Type"] == "application/json"
    else:
        assert "Content-Type" not in request.headers


def test_cancel_order_example():
    """Limit order cancellation puts the signature in the query string"""
    request = _resolve("limitOrder", "cancelOrder", {
        "chainId": "1",
        "orderHash": "0x123456789abcdef",
        "signature": "0xabcdef123456789",
    })

    assert request.method == "DELETE"
    assert request.full_url == (
        "https://api.1inch.dev/orderbook/v4.0/1/order/0x123456789abcdef?signature=0xabcdef123456789"
    )
    assert request.body is None


class TestOptionalFields:

    QUOTE = {"chainId": "1", "src": "0xsrc", "dst": "0xdst", "amount": "1000"}

    def test_quote_without_protocols(self):
        request = _resolve("swap", "getQuote", self.QUOTE)
        assert "protocols" not in request.params
        assert "protocols" not in request.full_url

    def test_quote_with_empty_protocols(self):
        request = _resolve("swap", "getQuote", {**self.QUOTE, "protocols": ""})
        assert "protocols" not in request.params

    def test_quote_with_protocols(self):
        request = _resolve("swap", "getQuote", {**self.QUOTE, "protocols": "UNISWAP_V3"})
        assert request.params["protocols"] == "UNISWAP_V3"

    def test_slippage_defaults_to_one(self):
        values = {**self.QUOTE, "from": "0xfrom"}
        request = _resolve("swap", "getSwap", values)
        assert request.params["slippage"] == "1"

        request = _resolve("swap", "getSwap", {**values, "slippage": ""})
        assert request.params["slippage"] == "1"

        request = _resolve("swap", "getSwap", {**values, "slippage": "3"})
        assert request.params["slippage"] == "3"

    def test_pagination_defaults(self):
        orders = _resolve("limitOrder", "getOrders", {"chainId": "1", "maker": "0xmaker"})
        assert orders.params == {"maker": "0xmaker", "limit": 100, "offset": 0}

        fusion = _resolve("fusionOrder", "getFusionOrders", {"chainId": "1", "address": "0xa"})
        assert fusion.params == {"address": "0xa", "limit": 50, "offset": 0}

    def test_zero_offset_is_kept(self):
        request = _resolve("portfolio", "getTransactions", {
            "addresses": "0xa", "chainId": 1, "limit": 25, "offset": 0,
        })
        assert request.params["offset"] == 0
        assert request.params["limit"] == 25

    def test_value_chart_timerange_default(self):
        request = _resolve("portfolio", "getValueChart", {"addresses": "0xa", "chainId": 1})
        assert request.params["timerange"] == "1week"


class TestResolution:

    def test_missing_required_parameter(self):
        with pytest.raises(ConfigurationError) as exc_info:
            _resolve("swap", "getQuote", {"chainId": "1", "src": "0xsrc"})
        assert "dst" in str(exc_info.value)

    def test_per_item_values(self):
        descriptor = ResourceRouter.resolve("limitOrder", "getOrder")
        parameters = ItemParameters(
            [{"orderHash": "0xaa"}, {"orderHash": "0xbb"}],
            shared={"chainId": "56"},
        )
        credential = Credential(api_key="k", base_url=BASE)

        urls = [
            resolve_request(descriptor, ItemContext(credential, i, parameters)).url
            for i in range(2)
        ]
        assert urls == [
            f"{BASE}/orderbook/v4.0/56/order/0xaa",
            f"{BASE}/orderbook/v4.0/56/order/0xbb",
        ]

    def test_path_segments_are_encoded(self):
        request = _resolve("crossChain", "getCrossChainStatus", {"txHash": "a/b c", "fromChainId": 1})
        assert request.url == f"{BASE}/cross-chain/v1.0/status/a%2Fb%20c"

    def test_body_keeps_value_types(self):
        request = _resolve("crossChain", "createCrossChainSwap")
        assert request.body["fromChainId"] == 1
        assert request.body["toChainId"] == 56

    def test_custom_base_url(self):
        context = ItemContext(
            credential=Credential(api_key="k", base_url="https://proxy.example.com/"),
            index=0,
            parameters=StaticParameters({"chainId": "1"}),
        )
        request = resolve_request(ResourceRouter.resolve("swap", "getTokens"), context)
        assert request.url == "https://proxy.example.com/swap/v6.0/1/tokens"

    def test_identical_inputs_resolve_identically(self):
        first = _resolve("swap", "getQuote")
        second = _resolve("swap", "getQuote")
        assert first is not second
        assert first.full_url == second.full_url
        assert first.headers == second.headers

    def test_repr_hides_authorization(self):
        request = _resolve("swap", "getTokens")
        assert "test-api-key" not in repr(request)
