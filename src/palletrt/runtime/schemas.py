# src/palletrt/runtime/schemas.py
from __future__ import annotations

"""Pydantic schemas for externally constructed blocks.

Blocks arrive as JSON-like dicts; these models reject anything outside the
closed call union before a single byte of state is touched. Once validated,
they are converted into the runtime's own dataclasses.

Call shape:
  {"pallet": "balances", "call": "transfer", "to": "bob", "amount": 30}
  {"pallet": "proof_of_existence", "call": "create_claim", "claim": "..."}
  {"pallet": "proof_of_existence", "call": "revoke_claim", "claim": "..."}
"""

from typing import Annotated, Any, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from palletrt.runtime.apply.balances import Transfer
from palletrt.runtime.apply.proof_of_existence import CreateClaim, RevokeClaim
from palletrt.runtime.calls import Balances, ProofOfExistence, RuntimeCall
from palletrt.runtime.types import Block, Extrinsic, Header

Json = Dict[str, Any]


class TransferCall(BaseModel):
    model_config = ConfigDict(extra="forbid")

    pallet: Literal["balances"]
    call: Literal["transfer"]
    to: str = Field(..., min_length=1, description="Receiving account id")
    amount: int = Field(..., ge=0, description="Amount to move")


class CreateClaimCall(BaseModel):
    model_config = ConfigDict(extra="forbid")

    pallet: Literal["proof_of_existence"]
    call: Literal["create_claim"]
    claim: str = Field(..., description="Content being claimed")


class RevokeClaimCall(BaseModel):
    model_config = ConfigDict(extra="forbid")

    pallet: Literal["proof_of_existence"]
    call: Literal["revoke_claim"]
    claim: str = Field(..., description="Content being released")


CallModel = Annotated[
    Union[TransferCall, CreateClaimCall, RevokeClaimCall],
    Field(discriminator="call"),
]


class ExtrinsicModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    caller: str = Field(..., min_length=1, description="Pre-authenticated account id")
    call: CallModel


class HeaderModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    block_number: int = Field(..., ge=0)


class BlockModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    header: HeaderModel
    extrinsics: List[ExtrinsicModel] = Field(default_factory=list)


def _call_from_model(m: Union[TransferCall, CreateClaimCall, RevokeClaimCall]) -> RuntimeCall:
    if isinstance(m, TransferCall):
        return Balances(Transfer(to=m.to, amount=m.amount))
    if isinstance(m, CreateClaimCall):
        return ProofOfExistence(CreateClaim(claim=m.claim))
    return ProofOfExistence(RevokeClaim(claim=m.claim))


def block_from_json(obj: Any) -> Block:
    """Validate and convert a block. Accepts a dict or a JSON string/bytes.

    Raises pydantic.ValidationError on malformed input.
    """
    if isinstance(obj, (str, bytes, bytearray)):
        model = BlockModel.model_validate_json(obj)
    else:
        model = BlockModel.model_validate(obj)

    return Block(
        header=Header(block_number=model.header.block_number),
        extrinsics=[Extrinsic(caller=e.caller, call=_call_from_model(e.call)) for e in model.extrinsics],
    )


def call_to_json(call: RuntimeCall) -> Json:
    inner = call.call
    if isinstance(inner, Transfer):
        return {"pallet": "balances", "call": "transfer", "to": inner.to, "amount": int(inner.amount)}
    if isinstance(inner, (CreateClaim, RevokeClaim)):
        return {"pallet": "proof_of_existence", "call": inner.name, "claim": inner.claim}
    raise TypeError(f"unknown runtime call: {call!r}")


def block_to_json(block: Block) -> Json:
    return {
        "header": block.header.to_json(),
        "extrinsics": [{"caller": e.caller, "call": call_to_json(e.call)} for e in block.extrinsics],
    }
