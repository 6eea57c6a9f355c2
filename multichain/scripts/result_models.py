"""Typed result records for MultiChain JSON-RPC methods.

Field names follow the node's JSON keys; ``json_field`` maps a snake_case
attribute to a camelCase or hyphenated key. Fields without a default are
required when decoding.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def json_field(key: str, default: Any = None) -> Any:
    return field(default=default, metadata={"key": key})


# --- general / blockchain -------------------------------------------------


@dataclass(frozen=True)
class AssetRestrictions:
    send: bool | None = None
    receive: bool | None = None


@dataclass(frozen=True)
class AssetIssue:
    txid: str
    qty: float | None = None
    raw: int | None = None
    details: dict[str, Any] | None = None
    issuers: list[str] | None = None


@dataclass(frozen=True)
class GetAssetInfoResult:
    name: str | None
    issuetxid: str
    assetref: str | None = None
    multiple: int | None = None
    units: float | None = None
    open: bool | None = None
    restrict: AssetRestrictions | None = None
    fungible: bool | None = None
    canopen: bool | None = None
    canclose: bool | None = None
    totallimit: float | None = None
    issuelimit: float | None = None
    details: dict[str, Any] | None = None
    issueqty: float | None = None
    issueraw: int | None = None
    subscribed: bool | None = None
    issuecount: int | None = None
    issues: list[AssetIssue] | None = None


@dataclass(frozen=True)
class GetBlockchainInfoResult:
    chain: str
    chainname: str
    blocks: int
    headers: int | None = None
    bestblockhash: str | None = None
    difficulty: float | None = None
    verificationprogress: float | None = None
    chainwork: str | None = None
    description: str | None = None
    protocol: str | None = None
    setupblocks: int | None = None
    reindex: bool | None = None


@dataclass(frozen=True)
class _BlockHeader:
    hash: str
    height: int
    confirmations: int | None = None
    size: int | None = None
    version: int | None = None
    merkleroot: str | None = None
    miner: str | None = None
    time: int | None = None
    nonce: int | None = None
    bits: str | None = None
    difficulty: float | None = None
    chainwork: str | None = None
    previousblockhash: str | None = None
    nextblockhash: str | None = None


@dataclass(frozen=True)
class GetBlockVerboseResult(_BlockHeader):
    tx: list[str] | None = None


@dataclass(frozen=True)
class GetBlockResultV1(_BlockHeader):
    tx: list[str] | None = None


@dataclass(frozen=True)
class TxLocation:
    start: int
    length: int


@dataclass(frozen=True)
class BlockTxLocation:
    txid: str
    location: TxLocation | None = None


@dataclass(frozen=True)
class GetBlockResultV2(_BlockHeader):
    tx: list[BlockTxLocation] | None = None


@dataclass(frozen=True)
class ScriptSig:
    asm: str | None = None
    hex: str | None = None


@dataclass(frozen=True)
class ScriptPubKey:
    asm: str | None = None
    hex: str | None = None
    type: str | None = None
    req_sigs: int | None = json_field("reqSigs")
    addresses: list[str] | None = None


@dataclass(frozen=True)
class TxInput:
    txid: str | None = None
    vout: int | None = None
    coinbase: str | None = None
    script_sig: ScriptSig | None = json_field("scriptSig")
    sequence: int | None = None


@dataclass(frozen=True)
class TxOutput:
    value: float
    n: int
    script_pub_key: ScriptPubKey | None = json_field("scriptPubKey")
    assets: list[dict[str, Any]] | None = None
    permissions: list[dict[str, Any]] | None = None
    items: list[dict[str, Any]] | None = None


@dataclass(frozen=True)
class DecodeRawTransactionResult:
    txid: str
    version: int | None = None
    locktime: int | None = None
    vin: list[TxInput] | None = None
    vout: list[TxOutput] | None = None
    issue: dict[str, Any] | None = None
    data: list[Any] | None = None


@dataclass(frozen=True)
class GetRawTransactionResult(DecodeRawTransactionResult):
    hex: str | None = None
    blockhash: str | None = None
    confirmations: int | None = None
    time: int | None = None
    blocktime: int | None = None


@dataclass(frozen=True)
class GetBlockResultV3(_BlockHeader):
    tx: list[GetRawTransactionResult] | None = None


@dataclass(frozen=True)
class GetBlockResultV4(_BlockHeader):
    tx: list[GetRawTransactionResult] | None = None


@dataclass(frozen=True)
class GetChainTipsResult:
    height: int
    hash: str
    branchlen: int | None = None
    status: str | None = None


@dataclass(frozen=True)
class GetLastBlockInfoResult:
    hash: str
    height: int
    time: int | None = None
    txcount: int | None = None
    miner: str | None = None


@dataclass(frozen=True)
class GetMemPoolInfoResult:
    size: int
    bytes: int | None = None


@dataclass(frozen=True)
class RawMemPoolEntry:
    size: int | None = None
    fee: float | None = None
    time: int | None = None
    height: int | None = None
    startingpriority: float | None = None
    currentpriority: float | None = None
    depends: list[str] | None = None


@dataclass(frozen=True)
class GetTxOutResult:
    bestblock: str
    confirmations: int
    value: float | None = None
    script_pub_key: ScriptPubKey | None = json_field("scriptPubKey")
    version: int | None = None
    coinbase: bool | None = None
    assets: list[dict[str, Any]] | None = None
    permissions: list[dict[str, Any]] | None = None


@dataclass(frozen=True)
class GetTxOutSetInfoResult:
    height: int
    bestblock: str
    transactions: int | None = None
    txouts: int | None = None
    bytes_serialized: int | None = None
    hash_serialized: str | None = None
    total_amount: float | None = None


@dataclass(frozen=True)
class ListBlocksResult:
    hash: str
    height: int
    miner: str | None = None
    confirmations: int | None = None
    time: int | None = None
    txcount: int | None = None


@dataclass(frozen=True)
class ListPermissionsResult:
    address: str
    type: str
    startblock: int | None = None
    endblock: int | None = None
    admins: list[str] | None = None
    pending: list[dict[str, Any]] | None = None


@dataclass(frozen=True)
class StreamEntityResult:
    name: str
    createtxid: str
    streamref: str | None = None
    open: bool | None = None
    restrict: dict[str, Any] | None = None
    details: dict[str, Any] | None = None
    subscribed: bool | None = None
    synchronized: bool | None = None
    items: int | None = None
    confirmed: int | None = None
    keys: int | None = None
    publishers: int | None = None
    creators: list[str] | None = None
    filters: list[dict[str, Any]] | None = None


@dataclass(frozen=True)
class FilterResult:
    name: str
    createtxid: str
    filterref: str | None = None
    language: str | None = None
    codelength: int | None = None
    approved: bool | None = None
    compiled: bool | None = None
    address: str | None = None
    for_: list[dict[str, Any]] | None = json_field("for")


@dataclass(frozen=True)
class RunFilterResult:
    valid: bool
    reason: str | None = None
    time: float | None = None
    callbacks: list[dict[str, Any]] | None = None


@dataclass(frozen=True)
class ListUpgradesResult:
    name: str | None
    createtxid: str
    upgraderef: str | None = None
    params: dict[str, Any] | None = None
    startblock: int | None = None
    approved: bool | None = None
    appliedblock: int | None = None
    admins: list[str] | None = None
    required: int | None = None


# --- control --------------------------------------------------------------


@dataclass(frozen=True)
class GetInfoResult:
    version: str
    chainname: str
    nodeversion: int | None = None
    protocolversion: int | None = None
    description: str | None = None
    protocol: str | None = None
    port: int | None = None
    setupblocks: int | None = None
    nodeaddress: str | None = None
    burnaddress: str | None = None
    incomingpaused: bool | None = None
    miningpaused: bool | None = None
    offchainpaused: bool | None = None
    walletversion: int | None = None
    balance: float | None = None
    walletdbversion: int | None = None
    reindex: bool | None = None
    blocks: int | None = None
    timeoffset: int | None = None
    connections: int | None = None
    proxy: str | None = None
    difficulty: float | None = None
    testnet: bool | None = None
    keypoololdest: int | None = None
    keypoolsize: int | None = None
    paytxfee: float | None = None
    relayfee: float | None = None
    errors: str | None = None


@dataclass(frozen=True)
class GetInitStatusResult:
    initialized: bool
    chainname: str | None = None
    version: str | None = None
    nodeversion: int | None = None
    networkstatus: str | None = None
    ips: list[str] | None = None


# --- mining / generate ----------------------------------------------------


@dataclass(frozen=True)
class GetMiningInfoResult:
    blocks: int
    currentblocksize: int | None = None
    currentblocktx: int | None = None
    difficulty: float | None = None
    errors: str | None = None
    genproclimit: int | None = None
    networkhashps: float | None = None
    pooledtx: int | None = None
    testnet: bool | None = None
    chain: str | None = None
    generate: bool | None = None
    hashespersec: float | None = None


# --- network --------------------------------------------------------------


@dataclass(frozen=True)
class GetNetTotalsResult:
    totalbytesrecv: int
    totalbytessent: int
    timemillis: int | None = None
    uploadtarget: dict[str, Any] | None = None


@dataclass(frozen=True)
class NetworkEntry:
    name: str
    limited: bool | None = None
    reachable: bool | None = None
    proxy: str | None = None
    proxy_randomize_credentials: bool | None = None


@dataclass(frozen=True)
class GetNetworkInfoResult:
    version: int
    subversion: str | None = None
    protocolversion: int | None = None
    localservices: str | None = None
    timeoffset: int | None = None
    connections: int | None = None
    networks: list[NetworkEntry] | None = None
    relayfee: float | None = None
    localaddresses: list[dict[str, Any]] | None = None
    warnings: str | None = None


@dataclass(frozen=True)
class GetPeerInfoResult:
    id: int
    addr: str
    addrlocal: str | None = None
    services: str | None = None
    lastsend: int | None = None
    lastrecv: int | None = None
    bytessent: int | None = None
    bytesrecv: int | None = None
    conntime: int | None = None
    pingtime: float | None = None
    version: int | None = None
    subver: str | None = None
    handshakelocal: str | None = None
    handshake: str | None = None
    inbound: bool | None = None
    startingheight: int | None = None
    banscore: int | None = None
    synced_headers: int | None = None
    synced_blocks: int | None = None
    inflight: list[int] | None = None
    whitelisted: bool | None = None


@dataclass(frozen=True)
class AddedNodeAddress:
    address: str
    connected: str | None = None


@dataclass(frozen=True)
class GetAddedNodeInfoResult:
    addednode: str
    connected: bool | None = None
    addresses: list[AddedNodeAddress] | None = None


# --- off-chain ------------------------------------------------------------


@dataclass(frozen=True)
class ChunkQueueCounts:
    waiting: int | None = None
    querying: int | None = None
    retrieving: int | None = None


@dataclass(frozen=True)
class GetChunkQueueInfoResult:
    chunks: ChunkQueueCounts
    bytes: ChunkQueueCounts


@dataclass(frozen=True)
class ChunkQueueTotals:
    queries: int | None = None
    requests: int | None = None
    responses: int | None = None
    unresponded: int | None = None
    retrieved: int | None = None


@dataclass(frozen=True)
class GetChunkQueueTotalsResult:
    chunks: ChunkQueueTotals
    bytes: ChunkQueueTotals


# --- raw ------------------------------------------------------------------


@dataclass(frozen=True)
class SignRawTransactionResult:
    hex: str
    complete: bool
    errors: list[dict[str, Any]] | None = None


@dataclass(frozen=True)
class DecodeRawExchangeResult:
    offer: dict[str, Any]
    ask: dict[str, Any]
    cancomplete: bool | None = None
    candisable: bool | None = None
    complete: bool | None = None
    exchanges: list[dict[str, Any]] | None = None
    requiredfee: float | None = None


# --- utility --------------------------------------------------------------


@dataclass(frozen=True)
class CreateKeyPairsResult:
    address: str
    pubkey: str
    privkey: str


@dataclass(frozen=True)
class CreateMultiSigResult:
    address: str
    redeem_script: str = json_field("redeemScript", "")


@dataclass(frozen=True)
class ValidateAddressResult:
    isvalid: bool
    address: str | None = None
    ismine: bool | None = None
    iswatchonly: bool | None = None
    isscript: bool | None = None
    pubkey: str | None = None
    iscompressed: bool | None = None
    account: str | None = None
    synchronized: bool | None = None


# --- wallet ---------------------------------------------------------------


@dataclass(frozen=True)
class AssetBalance:
    name: str | None
    qty: float
    assetref: str | None = None
    raw: int | None = None


@dataclass(frozen=True)
class GetAddressesResult:
    address: str
    ismine: bool | None = None
    iswatchonly: bool | None = None
    isscript: bool | None = None
    pubkey: str | None = None
    iscompressed: bool | None = None
    account: str | None = None
    synchronized: bool | None = None


@dataclass(frozen=True)
class ListAddressesResult:
    address: str
    ismine: bool | None = None


@dataclass(frozen=True)
class GetWalletInfoResult:
    walletversion: int
    balance: float | None = None
    walletdbversion: int | None = None
    txcount: int | None = None
    utxocount: int | None = None
    keypoololdest: int | None = None
    keypoolsize: int | None = None
    unlocked_until: int | None = None


@dataclass(frozen=True)
class BalanceDelta:
    amount: float | None = None
    assets: list[AssetBalance] | None = None


@dataclass(frozen=True)
class WalletTransactionResult:
    txid: str
    balance: BalanceDelta | None = None
    myaddresses: list[str] | None = None
    addresses: list[str] | None = None
    permissions: list[dict[str, Any]] | None = None
    items: list[dict[str, Any]] | None = None
    data: list[Any] | None = None
    confirmations: int | None = None
    blockhash: str | None = None
    blockindex: int | None = None
    blocktime: int | None = None
    valid: bool | None = None
    time: int | None = None
    timereceived: int | None = None
    comment: str | None = None
    vin: list[dict[str, Any]] | None = None
    vout: list[dict[str, Any]] | None = None
    hex: str | None = None


@dataclass(frozen=True)
class GetTransactionResult:
    txid: str
    amount: float | None = None
    fee: float | None = None
    confirmations: int | None = None
    blockhash: str | None = None
    blockindex: int | None = None
    blocktime: int | None = None
    time: int | None = None
    timereceived: int | None = None
    details: list[dict[str, Any]] | None = None
    hex: str | None = None


@dataclass(frozen=True)
class UnspentOutput:
    txid: str
    vout: int
    address: str | None = None
    account: str | None = None
    script_pub_key: str | None = json_field("scriptPubKey")
    amount: float | None = None
    confirmations: int | None = None
    cansend: bool | None = None
    spendable: bool | None = None
    assets: list[AssetBalance] | None = None
    permissions: list[dict[str, Any]] | None = None
    redeem_script: str | None = json_field("redeemScript")


@dataclass(frozen=True)
class StreamItem:
    txid: str
    publishers: list[str] | None = None
    keys: list[str] | None = None
    offchain: bool | None = None
    available: bool | None = None
    data: Any = None
    confirmations: int | None = None
    blocktime: int | None = None
    blockhash: str | None = None
    blockindex: int | None = None
    vout: int | None = None
    valid: bool | None = None
    time: int | None = None
    timereceived: int | None = None


@dataclass(frozen=True)
class StreamKeyResult:
    key: str
    items: int
    confirmed: int | None = None
    first: Any = None
    last: Any = None


@dataclass(frozen=True)
class StreamPublisherResult:
    publisher: str
    items: int
    confirmed: int | None = None
    first: Any = None
    last: Any = None


@dataclass(frozen=True)
class ReceivedByResult:
    amount: float
    confirmations: int | None = None
    address: str | None = None
    account: str | None = None
    txids: list[str] | None = None
    involves_watchonly: bool | None = json_field("involvesWatchonly")


@dataclass(frozen=True)
class ListSinceBlockResult:
    transactions: list[dict[str, Any]]
    lastblock: str


@dataclass(frozen=True)
class LockedOutput:
    txid: str
    vout: int
