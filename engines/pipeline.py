"""Filter pipeline: dispatch, timing and metrics."""

import logging
from typing import Dict, List

import numpy as np

from engines.block_quantizer import BlockQuantizer
from engines.channel_balance import ChannelBalanceFilter
from engines.dct_engine import BLOCK_SIZE
from engines.histogram_quantizer import HistogramQuantizer
from engines.luma import display_luma_array, ranking_luma_array
from models.filter_params import STRATEGIES, FilterParams
from models.filter_result import FilterResult
from models.pixel_buffer import PixelBuffer
from utils.metrics import Timer, compute_psnr_ssim, count_levels

logger = logging.getLogger(__name__)


def make_filter(params: FilterParams):
    """Filter object for params.strategy."""
    if params.strategy == 'block':
        return BlockQuantizer(keep=params.keep, backend=params.dct_backend, workers=params.workers)
    if params.strategy == 'histogram':
        return HistogramQuantizer(workers=params.workers)
    return ChannelBalanceFilter(workers=params.workers)


def run_filter(image: PixelBuffer, params: FilterParams) -> FilterResult:
    """Run one filter over image and collect stats."""
    timer = Timer()
    image_filter = make_filter(params)
    filtered = timer.measure(image_filter.filter, image)
    logger.info("%s filter on %dx%d took %.2f ms",
                params.strategy, image.width, image.height, timer.elapsed_ms)

    filtered_y = filtered.array[:, :, 0]
    metrics = compute_psnr_ssim(display_luma_array(image.array), filtered_y)

    return FilterResult(
        original_image=image,
        filtered_image=filtered,
        strategy=params.strategy,
        distinct_keys=int(np.unique(ranking_luma_array(image.array)).size),
        output_levels=count_levels(filtered_y),
        psnr_y=metrics['psnr_y'],
        ssim_y=metrics['ssim_y'],
        filter_time_ms=timer.elapsed_ms,
    )


def benchmark(image: PixelBuffer, base_params: FilterParams, repeat: int = 3) -> List[Dict]:
    """Best and mean runtime of every strategy over `repeat` runs on the same image."""
    rows = []
    for strategy in STRATEGIES:
        if strategy == 'block' and min(image.width, image.height) < BLOCK_SIZE:
            logger.warning("Skipping block strategy: image is %dx%d", image.width, image.height)
            continue
        params = FilterParams(
            strategy=strategy,
            dct_backend=base_params.dct_backend,
            keep=base_params.keep,
            workers=base_params.workers,
        )
        image_filter = make_filter(params)
        timer = Timer()
        times = []
        for _ in range(max(1, repeat)):
            timer.measure(image_filter.filter, image)
            times.append(timer.elapsed_ms)
        rows.append({'strategy': strategy, 'best_ms': min(times), 'mean_ms': sum(times) / len(times)})
    return rows
