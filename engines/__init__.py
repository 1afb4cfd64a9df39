"""Filter engines - pure computation over pixel buffers."""

from .luma import (
    ranking_luma,
    display_luma,
    ranking_luma_array,
    display_luma_array,
    balanced_luma_array,
)
from .dct_engine import (
    DCT_BASIS,
    forward_dct,
    inverse_dct,
    forward_dct_direct,
    inverse_dct_direct,
    discard_high_frequencies,
    encode_block,
    decode_block,
)
from .block_processor import pad_to_multiple, iter_tiles, crop
from .block_quantizer import BlockQuantizer, quantize_block
from .histogram_quantizer import HistogramQuantizer, build_mapping
from .channel_balance import ChannelBalanceFilter
from .pipeline import run_filter, benchmark

__all__ = [
    'ranking_luma',
    'display_luma',
    'ranking_luma_array',
    'display_luma_array',
    'balanced_luma_array',
    'DCT_BASIS',
    'forward_dct',
    'inverse_dct',
    'forward_dct_direct',
    'inverse_dct_direct',
    'discard_high_frequencies',
    'encode_block',
    'decode_block',
    'pad_to_multiple',
    'iter_tiles',
    'crop',
    'BlockQuantizer',
    'quantize_block',
    'HistogramQuantizer',
    'build_mapping',
    'ChannelBalanceFilter',
    'run_filter',
    'benchmark',
]
