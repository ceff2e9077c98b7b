# src/palletrt/runtime/apply/proof_of_existence.py
from __future__ import annotations

"""palletrt.runtime.apply.proof_of_existence

Claim registry: each content key has at most one owner at a time. An owner
may revoke a claim, after which anyone may claim the content again.
"""

from dataclasses import dataclass
from typing import Dict, Generic, Optional, Union

from palletrt.runtime.errors import AlreadyClaimed, ClaimNotFound, NotClaimOwner
from palletrt.runtime.types import A, C, Json


@dataclass(frozen=True)
class CreateClaim(Generic[C]):
    claim: C

    name = "create_claim"


@dataclass(frozen=True)
class RevokeClaim(Generic[C]):
    claim: C

    name = "revoke_claim"


ProofOfExistenceCall = Union[CreateClaim, RevokeClaim]


class ProofOfExistencePallet(Generic[A, C]):
    def __init__(self) -> None:
        self._claims: Dict[C, A] = {}

    def get_claim(self, content: C) -> Optional[A]:
        return self._claims.get(content)

    def create_claim(self, caller: A, content: C) -> None:
        if content in self._claims:
            raise AlreadyClaimed({"claim": content, "owner": self._claims[content]})
        self._claims[content] = caller

    def revoke_claim(self, caller: A, content: C) -> None:
        owner = self._claims.get(content)
        if owner is None:
            raise ClaimNotFound({"claim": content})
        if owner != caller:
            raise NotClaimOwner({"claim": content, "owner": owner, "caller": caller})
        del self._claims[content]

    def dispatch(self, caller: A, call: ProofOfExistenceCall) -> None:
        if isinstance(call, CreateClaim):
            self.create_claim(caller, call.claim)
            return
        if isinstance(call, RevokeClaim):
            self.revoke_claim(caller, call.claim)
            return
        raise TypeError(f"not a proof_of_existence call: {call!r}")

    def to_json(self) -> Json:
        return {"claims": {str(k): self._claims[k] for k in sorted(self._claims, key=str)}}
