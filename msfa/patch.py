"""Unpacking of DX7 bulk-dump voice data."""

BULK_SIZE = 128
PATCH_SIZE = 156


def _s8(value: int) -> int:
    return value - 256 if value & 0x80 else value


def unpack_patch(bulk: bytes) -> bytes:
    """Expand a 128-byte packed voice into the 156-byte parameter layout."""
    bulk = bytes(bulk)
    if len(bulk) != BULK_SIZE:
        raise ValueError(f"packed voice must be {BULK_SIZE} bytes, got {len(bulk)}")
    patch = bytearray(PATCH_SIZE)
    for op in range(6):
        src = bulk[op * 17:(op + 1) * 17]
        dst = op * 21
        # EG rates and levels, break point, depths
        patch[dst:dst + 11] = src[:11]
        curves = _s8(src[11])
        patch[dst + 11] = curves & 3
        patch[dst + 12] = (curves >> 2) & 3
        detune_rs = _s8(src[12])
        patch[dst + 13] = detune_rs & 7
        patch[dst + 20] = (detune_rs >> 3) & 0xFF
        kvs_ams = _s8(src[13])
        patch[dst + 14] = kvs_ams & 3
        patch[dst + 15] = (kvs_ams >> 2) & 0xFF
        patch[dst + 16] = src[14]
        fcoarse_mode = _s8(src[15])
        patch[dst + 17] = fcoarse_mode & 1
        patch[dst + 18] = (fcoarse_mode >> 1) & 0xFF
        patch[dst + 19] = src[16]
    # pitch envelope and algorithm
    patch[126:135] = bulk[102:111]
    oks_fb = _s8(bulk[111])
    patch[135] = oks_fb & 7
    patch[136] = (oks_fb >> 3) & 0xFF
    patch[137:141] = bulk[112:116]
    lfo = _s8(bulk[116])
    patch[141] = lfo & 1
    patch[142] = (lfo >> 1) & 7
    patch[143] = (lfo >> 4) & 0xFF
    # transpose and name
    patch[144:155] = bulk[117:128]
    patch[155] = 0x3F  # all operators on
    return bytes(patch)