from typing import Any, Callable


KeyHasher = Callable[[Any], int]

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
_U32 = 0xFFFFFFFF


# anagrams collide, only good for predictable indices
def additive_digest(key: str) -> int:
    if not isinstance(key, str):
        raise TypeError("key is not a string", key)

    digest = 0
    for ch in key:
        digest += ord(ch)
    return digest


def fnv1a_digest(key: str) -> int:
    if not isinstance(key, str):
        raise TypeError("key is not a string", key)

    digest = FNV_OFFSET_BASIS
    # lone surrogates are valid str but not valid UTF-8
    for b in key.encode("utf-8", "surrogatepass"):
        digest ^= b
        digest = (digest * FNV_PRIME) & _U32
    return digest


def index_for(digest: int, capacity: int) -> int:
    return digest % capacity
