"""
Builtin catalog of well-known, state-changing contract interfaces.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

from dao_action_builder.predefined.registry import PredefinedMethod


def _function(
    name: str,
    inputs: List[Tuple[str, str]],
    outputs: Tuple[str, ...] = (),
    state_mutability: str = "nonpayable",
) -> Dict[str, Any]:
    return {
        "type": "function",
        "name": name,
        "inputs": [{"name": arg, "type": abi_type} for arg, abi_type in inputs],
        "outputs": [{"name": "", "type": abi_type} for abi_type in outputs],
        "stateMutability": state_mutability,
    }


ERC20_METHODS = PredefinedMethod(
    id="erc20",
    name="ERC-20",
    description="Standard ERC-20 token interface",
    abi=[
        _function("approve", [("spender", "address"), ("amount", "uint256")], ("bool",)),
        _function("transfer", [("to", "address"), ("amount", "uint256")], ("bool",)),
        _function(
            "transferFrom",
            [("from", "address"), ("to", "address"), ("amount", "uint256")],
            ("bool",),
        ),
        _function(
            "increaseAllowance", [("spender", "address"), ("addedValue", "uint256")], ("bool",)
        ),
        _function(
            "decreaseAllowance",
            [("spender", "address"), ("subtractedValue", "uint256")],
            ("bool",),
        ),
    ],
)

ERC721_METHODS = PredefinedMethod(
    id="erc721",
    name="ERC-721",
    description="Standard ERC-721 non-fungible token interface",
    abi=[
        _function("approve", [("to", "address"), ("tokenId", "uint256")]),
        _function("setApprovalForAll", [("operator", "address"), ("approved", "bool")]),
        _function(
            "transferFrom", [("from", "address"), ("to", "address"), ("tokenId", "uint256")]
        ),
        _function(
            "safeTransferFrom", [("from", "address"), ("to", "address"), ("tokenId", "uint256")]
        ),
        _function(
            "safeTransferFrom",
            [("from", "address"), ("to", "address"), ("tokenId", "uint256"), ("data", "bytes")],
        ),
    ],
)

ERC1155_METHODS = PredefinedMethod(
    id="erc1155",
    name="ERC-1155",
    description="Standard ERC-1155 multi-token interface",
    abi=[
        _function("setApprovalForAll", [("operator", "address"), ("approved", "bool")]),
        _function(
            "safeTransferFrom",
            [
                ("from", "address"),
                ("to", "address"),
                ("id", "uint256"),
                ("amount", "uint256"),
                ("data", "bytes"),
            ],
        ),
        _function(
            "safeBatchTransferFrom",
            [
                ("from", "address"),
                ("to", "address"),
                ("ids", "uint256[]"),
                ("amounts", "uint256[]"),
                ("data", "bytes"),
            ],
        ),
    ],
)

OWNABLE_METHODS = PredefinedMethod(
    id="ownable",
    name="Ownable",
    description="OpenZeppelin Ownable contract for basic access control",
    abi=[
        _function("transferOwnership", [("newOwner", "address")]),
        _function("renounceOwnership", []),
    ],
)

ACCESS_CONTROL_METHODS = PredefinedMethod(
    id="access-control",
    name="AccessControl",
    description="OpenZeppelin role-based access control",
    abi=[
        _function("grantRole", [("role", "bytes32"), ("account", "address")]),
        _function("revokeRole", [("role", "bytes32"), ("account", "address")]),
        _function("renounceRole", [("role", "bytes32"), ("callerConfirmation", "address")]),
    ],
)

PAUSABLE_METHODS = PredefinedMethod(
    id="pausable",
    name="Pausable",
    description="OpenZeppelin Pausable for emergency stops",
    abi=[
        _function("pause", []),
        _function("unpause", []),
    ],
)

UUPS_METHODS = PredefinedMethod(
    id="uups",
    name="UUPS Upgradeable",
    description="OpenZeppelin UUPS upgradeability pattern",
    abi=[
        _function("upgradeTo", [("newImplementation", "address")]),
        _function(
            "upgradeToAndCall",
            [("newImplementation", "address"), ("data", "bytes")],
            state_mutability="payable",
        ),
    ],
)

BUILTIN_METHODS: List[PredefinedMethod] = [
    ERC20_METHODS,
    ERC721_METHODS,
    ERC1155_METHODS,
    OWNABLE_METHODS,
    ACCESS_CONTROL_METHODS,
    PAUSABLE_METHODS,
    UUPS_METHODS,
]
