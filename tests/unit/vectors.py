"""Golden vectors, pinned once and checked against an independent secp256k1/Keccak implementation."""

EXAMPLE_SEED_32 = "0x3a1076bf45ab87712ad64ccb3b10217737f7faacbf2872e88fdd9a537d8fe266"
EXAMPLE_SEED_64 = (
    "0x3a1076bf45ab87712ad64ccb3b10217737f7faacbf2872e88fdd9a537d8fe266"
    "4c1a8a2c16c6c31400bcbab9bbe6b313986a61a43e9d2232d95d6aa335d319e8"
)
EXAMPLE_SEED_32_ADDRESS = "0xC2D7CF95645D33006175B78989035C7c9061d3F9"
EXAMPLE_SEED_64_PRIVATE_KEY = "0x5aaaf71920d0eec723b4b3bf1ca971ec6afa4fd184af9447155e3dd8aab9b8f9"
EXAMPLE_SEED_64_ADDRESS = "0x6ff85f6Cb1f6e16056F518a65a557F7f902105c4"

SEED_11 = "0x" + "11" * 32
SEED_11_PRIVATE_KEY = "0x" + "11" * 32
SEED_11_PUBLIC_KEY = (
    "0x04"
    "4f355bdcb7cc0af728ef3cceb9615d90684bb5b2ca5f859ab0f0b704075871aa"
    "385b6b1b8ead809ca67454d9683fcf2ba03456d6fe2c4abe2b07f0fbdbb2f1c1"
)
SEED_11_ADDRESS = "0x19E7E376E7C213B7E7e7e46cc70A5dD086DAff2A"

SEED_22_128 = "0x" + "22" * 64
SEED_22_128_PRIVATE_KEY = "0x8ee761a656179c3820b26df70074f86f945e9cbe128cb38639e62c911b07f33b"
SEED_22_128_PUBLIC_KEY = (
    "0x04"
    "c5bb8753f28be214229b90a5763852d7511ca4343c0b30fe202c6c6c8b2a9ae8"
    "a638151cf1bd111e7f1af9c0e425d2de14fc2c8bd8ae83223ce547a9796c1a73"
)
SEED_22_128_ADDRESS = "0x1856D40306969943aC1A9e066141D1a9e1cf835b"

SEED_22_130 = "0x" + "22" * 65
SEED_22_130_PRIVATE_KEY = "0xde47116cdbf61fca84c77179c15bb2d7affa92523ae63059f08bb6b9eab9b5d9"
SEED_22_130_ADDRESS = "0x8a88B75E12517D6484F3E4D40E14a9cb6EF848B3"

# private key 1 -> generator point G
ONE_SECRET = (1).to_bytes(32, "big")
ONE_PUBLIC_KEY = (
    "0x04"
    "79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
)
ONE_ADDRESS = "0x7E5F4552091A69125d5DfCb7b8C2659029395Bdf"

# secp256k1 group order
SECPK1_N_HEX = "fffffffffffffffffffffffffffffffebaaedce6af48a03bbfd25e8cd0364141"
