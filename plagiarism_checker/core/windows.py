"""
Window-size driver used by both matchers.

Every window size from the minimum match length up to the shorter
document's length is searched independently. Passes may run on a thread
pool, but their results are always concatenated in ascending window
order so the resolver sees a deterministic candidate list.

Window passes are pure-Python and CPU-bound, so the GIL keeps threads
from running them faster than the sequential loop. More workers only
guarantee the same ordered result; they are not a performance setting.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Dict, List

from tqdm import tqdm

from .models import Match

logger = logging.getLogger(__name__)

WindowSearch = Callable[[str, str, int], List[Match]]


def window_sizes(text_a: str, text_b: str, min_length: int) -> range:
    """All window sizes worth searching; empty when a document is too short."""
    return range(min_length, min(len(text_a), len(text_b)) + 1)


def collect_candidates(search_window: WindowSearch,
                       text_a: str,
                       text_b: str,
                       min_length: int,
                       max_workers: int = 1,
                       show_progress: bool = False,
                       desc: str = "Window sizes") -> List[Match]:
    """
    Run ``search_window`` for every window size and merge the results.

    :param search_window: one-window search of a matching strategy
    :param max_workers: thread pool size; 1 searches sequentially. Threads
        give no speedup under the GIL, the result is identical either way
    :param show_progress: display a tqdm bar over window sizes
    :return: candidates in ascending window order, discovery order within a window
    """
    sizes = window_sizes(text_a, text_b, min_length)
    if not sizes:
        return []

    per_window: Dict[int, List[Match]] = {}

    if max_workers <= 1 or len(sizes) == 1:
        for size in tqdm(sizes, desc=desc, disable=not show_progress, leave=False):
            per_window[size] = search_window(text_a, text_b, size)
    else:
        max_workers = min(max_workers, len(sizes))
        logger.debug(f"Searching {len(sizes)} window sizes using {max_workers} workers")
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            future_to_size = {
                executor.submit(search_window, text_a, text_b, size): size
                for size in sizes
            }
            for future in tqdm(as_completed(future_to_size), total=len(future_to_size),
                               desc=desc, disable=not show_progress, leave=False):
                per_window[future_to_size[future]] = future.result()

    candidates: List[Match] = []
    for size in sizes:
        found = per_window[size]
        if found:
            logger.debug(f"Window size {size}: {len(found)} candidates",
                         extra={'window_size': size, 'candidates': len(found)})
        candidates.extend(found)
    return candidates
