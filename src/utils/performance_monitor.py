# ========================
# src/utils/performance_monitor.py
# ========================

"""
Performance Monitoring Utilities

Tracks elapsed time, memory and row throughput for a pipeline run.
"""

import time
import os
import logging
from contextlib import contextmanager
from typing import Dict, Any, Optional

import psutil

logger = logging.getLogger(__name__)


class PerformanceMonitor:
    """
    Performance monitoring utility for the job postings pipeline.
    Tracks memory usage, processing time, throughput and per-stage checkpoints.
    """

    def __init__(self, name: str = "Pipeline", log_every_chunks: int = 100):
        """
        Initialize performance monitor.

        Args:
            name (str): Name for this monitoring session
            log_every_chunks (int): Log progress every N chunks
        """
        self.name = name
        self.log_every_chunks = log_every_chunks
        self.start_time = None
        self.end_time = None
        self.peak_memory_mb = 0.0
        self.records_processed = 0
        self.chunks_processed = 0
        self.checkpoints = []

        logger.debug(f"PerformanceMonitor initialized: {name}")

    def start_monitoring(self) -> None:
        """Start performance monitoring."""
        self.start_time = time.time()
        self.peak_memory_mb = self._get_memory_usage_mb()

        logger.info(f"{self.name} - Performance monitoring started")
        logger.info(f"Initial memory usage: {self.peak_memory_mb:.2f} MB")

    def update_progress(self, records_in_chunk: int) -> None:
        """
        Update progress tracking.

        Args:
            records_in_chunk (int): Number of rows processed in this chunk
        """
        self.records_processed += records_in_chunk
        self.chunks_processed += 1
        current_memory = self._get_memory_usage_mb()
        self.peak_memory_mb = max(self.peak_memory_mb, current_memory)

        if self.chunks_processed % self.log_every_chunks == 0:
            self._log_progress(current_memory)

    def add_checkpoint(self, name: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        """
        Add a performance checkpoint at the end of a pipeline stage.

        Args:
            name (str): Checkpoint name
            metadata (dict): Optional metadata to store
        """
        memory_mb = self._get_memory_usage_mb()
        self.peak_memory_mb = max(self.peak_memory_mb, memory_mb)
        checkpoint = {
            'name': name,
            'elapsed_seconds': time.time() - self.start_time if self.start_time else 0.0,
            'memory_mb': memory_mb,
            'records_processed': self.records_processed,
            'metadata': metadata or {}
        }
        self.checkpoints.append(checkpoint)
        logger.debug(f"Checkpoint '{name}': {checkpoint}")

    def _log_progress(self, current_memory: float) -> None:
        if self.start_time:
            elapsed = time.time() - self.start_time
            throughput = self.records_processed / elapsed if elapsed > 0 else 0

            logger.info(
                f"{self.name} - Progress: {self.chunks_processed} chunks, "
                f"{self.records_processed:,} rows, "
                f"{throughput:.0f} rows/sec, "
                f"Memory: {current_memory:.2f} MB"
            )

    def stop_monitoring(self) -> Dict[str, Any]:
        """
        Stop monitoring and return performance summary.

        Returns:
            dict: Performance statistics
        """
        self.end_time = time.time()
        total_time = self.end_time - self.start_time if self.start_time else 0
        throughput = self.records_processed / total_time if total_time > 0 else 0

        summary = {
            'name': self.name,
            'total_processing_time_seconds': total_time,
            'records_processed': self.records_processed,
            'chunks_processed': self.chunks_processed,
            'average_throughput_records_per_second': throughput,
            'peak_memory_usage_mb': self.peak_memory_mb,
            'checkpoints': self.checkpoints
        }

        self._print_summary(summary)
        return summary

    def _print_summary(self, summary: Dict[str, Any]) -> None:
        """Print formatted performance summary."""
        print("\n" + "="*60)
        print(f"PERFORMANCE SUMMARY - {summary['name']}")
        print("="*60)
        print(f"Total processing time: {summary['total_processing_time_seconds']:.2f} seconds")
        print(f"Rows enriched: {summary['records_processed']:,}")
        print(f"Chunks processed: {summary['chunks_processed']:,}")
        print(f"Average throughput: {summary['average_throughput_records_per_second']:.0f} rows/second")
        print(f"Peak memory usage: {summary['peak_memory_usage_mb']:.2f} MB")

        for checkpoint in summary['checkpoints']:
            print(f"  {checkpoint['name']:<10} {checkpoint['elapsed_seconds']:.2f}s")

        print("="*60)

    def _get_memory_usage_mb(self) -> float:
        """Get current resident memory in MB."""
        process = psutil.Process(os.getpid())
        return process.memory_info().rss / (1024 * 1024)

    def get_current_stats(self) -> Dict[str, Any]:
        """Get current performance statistics."""
        current_time = time.time()
        elapsed = current_time - self.start_time if self.start_time else 0
        current_memory = self._get_memory_usage_mb()

        return {
            'elapsed_seconds': elapsed,
            'records_processed': self.records_processed,
            'chunks_processed': self.chunks_processed,
            'current_memory_mb': current_memory,
            'peak_memory_mb': self.peak_memory_mb,
            'current_throughput': self.records_processed / elapsed if elapsed > 0 else 0,
            'checkpoints': [checkpoint['name'] for checkpoint in self.checkpoints]
        }


@contextmanager
def monitor_performance(name: str = "Pipeline"):
    """
    Context manager for easy performance monitoring.

    Args:
        name (str): Name for this monitoring session

    Yields:
        PerformanceMonitor: Monitor instance
    """
    monitor = PerformanceMonitor(name)
    monitor.start_monitoring()
    try:
        yield monitor
    finally:
        monitor.stop_monitoring()
