import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import seaborn as sns
import logging
import os

from ..container import TsContainer

logger = logging.getLogger(__name__)


class SeriesVisualizer:
    """Visualization utilities for cleaning and resampling results."""

    @staticmethod
    def plot_pipeline(container: TsContainer, output_dir: str = "./visualization/pictures") -> str:
        """
        Plot the original readings, the rejected ones and the resampled series.

        Parameters:
            container (TsContainer): Container holding the processed feed.
            output_dir (str): Directory to save the plot.

        Returns:
            str: path of the saved PNG
        """
        os.makedirs(output_dir, exist_ok=True)
        original = container.original.to_frame()
        rejected = container.rejected.to_frame()
        resampled = container.resampled.to_frame()

        plt.figure(figsize=(12, 6))
        plt.plot(original['timestamp'], original['value'], color='lightgray', label='Original')
        if not rejected.empty:
            plt.scatter(rejected['timestamp'], rejected['value'], color='red', s=12, label='Rejected')
        if not resampled.empty:
            # Gaps are NaN and break the line
            plt.step(resampled['timestamp'], resampled['value'], where='pre', color='blue', label='Resampled')
        plt.title(f"Cleaning overview - {container.cleaned.description}")
        plt.xlabel('time')
        plt.ylabel('value')
        plt.legend()

        filename = f"{output_dir}/pipeline_overview.png"
        plt.savefig(filename, format='png')
        logger.info(f"Saved plot: {filename}")

        plt.close()
        return filename

    @staticmethod
    def plot_distributions(container: TsContainer, output_dir: str = "./visualization/pictures") -> str:
        """
        Plot value distribution before and after cleaning and save the plot.

        Parameters:
            container (TsContainer): Container holding the processed feed.
            output_dir (str): Directory to save the plot.

        Returns:
            str: path of the saved PNG
        """
        os.makedirs(output_dir, exist_ok=True)

        plt.figure(figsize=(10, 6))
        sns.histplot(container.original.to_frame()['value'], label='Original', color='gray', alpha=0.5)
        sns.histplot(container.cleaned.to_frame()['value'], label='Cleaned', color='green', alpha=0.5)
        plt.title('Distribution Comparison')
        plt.xlabel('value')
        plt.ylabel('Count')
        plt.legend()

        filename = f"{output_dir}/value_distributions.png"
        plt.savefig(filename, format='png')
        logger.info(f"Saved plot: {filename}")

        plt.close()
        return filename
