# renderer/tone_mapping.py
import numpy as np

def to_u8(accumulated: np.ndarray) -> np.ndarray:
    """
    Quantize a linear float image to 8-bit channels.

    Each channel is clamped to [0, 1] and scaled by 256, saturating at 255,
    so 0.5 maps to 128 and anything at or above 1.0 maps to 255.
    """
    clamped = np.clip(accumulated, 0.0, 1.0)
    return np.minimum(np.floor(clamped * 256.0), 255).astype(np.uint8)
