"""Example usage of metralinks: render the schedule page for today."""

import logging
import sys
from pathlib import Path

# Add src to path so we can import metralinks
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from metralinks.link_builder import ScheduleLinkBuilder
from metralinks.page import LinkPage, render_links, write_page

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


def print_links(page: LinkPage):
    """
    Print every rendered link, grouped by container.

    Args:
        page: A page that has been through render_links().
    """
    print(f"\n{'='*70}")
    print("Metra schedule links")
    print(f"{'='*70}\n")

    for container_id, container in page.containers.items():
        print(f"{container_id}:")
        for link in container.links:
            print(f"  {link.text:<9} {link.url}")
        print()


def main(output_path: str = None):
    try:
        builder = ScheduleLinkBuilder()
        page = render_links(LinkPage(), builder)
    except Exception as e:
        logger.error(f"Failed to render links: {e}", exc_info=True)
        print(f"Error: {e}")
        sys.exit(1)

    if output_path:
        write_page(output_path, page)
    else:
        print_links(page)


if __name__ == "__main__":
    if len(sys.argv) > 1:
        # Command line mode: write the HTML page to the given path
        main(sys.argv[1])
    else:
        main()
