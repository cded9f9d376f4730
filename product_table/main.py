"""Main entry point for the product table."""

import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError

from .config import DEFAULT_CONFIG_FILE, ViewerConfig
from .controller import ProductTableController
from .errors import EmptyExportError, ProductNotFoundError, ProductSourceError
from .models import Product, ProductDraft
from .normalizer import normalize_image_url
from .render import format_detail, format_product_row, format_table
from .source import ProductSource
from .view import SortKey

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
    ]
)
logger = logging.getLogger(__name__)


def _make_source(config: ViewerConfig) -> ProductSource:
    return ProductSource(api_url=config.api_url, timeout=config.timeout_seconds)


async def load_controller(
    config: ViewerConfig,
    page_size: int | None = None,
) -> ProductTableController:
    """Fetch the collection and wrap it in a controller.

    Args:
        config: Viewer configuration
        page_size: Page size overriding the configured default

    Returns:
        Controller holding the fetched products
    """
    async with _make_source(config) as source:
        products = await source.fetch_all(
            offset=config.fetch_offset, limit=config.fetch_limit
        )

    return ProductTableController(
        products,
        page_size=page_size or config.page_size,
        page_size_options=config.page_size_options,
    )


def apply_view_args(controller: ProductTableController, args: argparse.Namespace) -> None:
    """Apply search and sort requests from the command line, in order."""
    if args.query:
        controller.search(args.query)
    for key in args.sort or []:
        state = controller.sort_by(key)
        logger.debug(f"Sorted by {state.key.value} ({state.direction.value})")


async def save_product(
    config: ViewerConfig,
    controller: ProductTableController,
    draft: ProductDraft,
    product_id: int | None = None,
) -> Product:
    """Create or update a product remotely and merge the result locally."""
    async with _make_source(config) as source:
        if product_id is None:
            saved = await source.create(draft)
            controller.add(saved)
            return saved
        saved = await source.update(product_id, draft)
    return controller.replace(product_id, saved)


def build_draft(args: argparse.Namespace, existing: Product | None = None) -> ProductDraft:
    """Build a draft from CLI fields, falling back to an existing product's values."""
    values = {
        "title": existing.title if existing else "",
        "price": existing.price if existing else 0,
        "description": existing.description if existing else "",
        "image_url": normalize_image_url(existing.images, placeholder="") if existing else "",
        "category_id": existing.category.id if existing and existing.category else 1,
    }
    for field in values:
        value = getattr(args, field, None)
        if value is not None:
            values[field] = value
    return ProductDraft.from_fields(**values)


def cmd_list(config: ViewerConfig, args: argparse.Namespace) -> int:
    controller = asyncio.run(load_controller(config, args.page_size))
    apply_view_args(controller, args)
    if args.page != 1 and not controller.go_to_page(args.page):
        logger.warning(f"Page {args.page} does not exist, showing page {controller.current_page}")
    print(format_table(controller.page(), controller.sort_state, config.thumbnail_placeholder))
    return 0


def cmd_show(config: ViewerConfig, args: argparse.Namespace) -> int:
    controller = asyncio.run(load_controller(config))
    product = controller.find(args.id)
    print(format_detail(product, config.detail_placeholder))
    return 0


def cmd_export(config: ViewerConfig, args: argparse.Namespace) -> int:
    controller = asyncio.run(load_controller(config))
    apply_view_args(controller, args)
    path = controller.export_to_file(args.output or config.export_file)
    print(f"Exported {len(controller.view)} products to {path}")
    return 0


def cmd_save(config: ViewerConfig, args: argparse.Namespace) -> int:
    controller = asyncio.run(load_controller(config))
    product_id = getattr(args, "id", None)
    existing = controller.find(product_id) if product_id is not None else None

    try:
        draft = build_draft(args, existing)
    except ValidationError as e:
        logger.debug(f"Invalid draft: {e}")
        print("Please fill all fields")
        return 1

    saved = asyncio.run(save_product(config, controller, draft, product_id))
    action = "updated" if existing else "created"
    print(f"Product {action} successfully!")
    print(format_product_row(saved, config.thumbnail_placeholder))
    return 0


def _add_view_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-q", "--query",
        default="",
        help="Filter products by title (case-insensitive)"
    )
    parser.add_argument(
        "-s", "--sort",
        action="append",
        choices=[key.value for key in SortKey],
        help="Sort column; repeat the same column to sort descending"
    )


def _add_product_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--title", help="Product title")
    parser.add_argument("--price", type=float, help="Product price")
    parser.add_argument("--description", help="Product description")
    parser.add_argument("--category-id", dest="category_id", type=int, help="Category id")
    parser.add_argument("--image", dest="image_url", help="Image URL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Product Table - search, sort, page and export remote products"
    )
    parser.add_argument(
        "-c", "--config",
        default=DEFAULT_CONFIG_FILE,
        help=f"Config file path (default: {DEFAULT_CONFIG_FILE})"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # List command (default)
    list_parser = subparsers.add_parser("list", help="Show one page of the product table")
    _add_view_arguments(list_parser)
    list_parser.add_argument(
        "-p", "--page",
        type=int,
        default=1,
        help="Page number (default: 1)"
    )
    list_parser.add_argument(
        "-n", "--page-size",
        dest="page_size",
        type=int,
        default=None,
        help="Products per page (default: from config)"
    )

    # Show command
    show_parser = subparsers.add_parser("show", help="Show product details")
    show_parser.add_argument("id", type=int, help="Product id")

    # Export command
    export_parser = subparsers.add_parser("export", help="Export the filtered view to CSV")
    _add_view_arguments(export_parser)
    export_parser.add_argument(
        "-o", "--output",
        default=None,
        help="CSV output path (default: from config)"
    )

    # Create command
    create_parser = subparsers.add_parser("create", help="Create a product")
    _add_product_arguments(create_parser)

    # Update command
    update_parser = subparsers.add_parser("update", help="Edit a product")
    update_parser.add_argument("id", type=int, help="Product id")
    _add_product_arguments(update_parser)

    return parser


COMMANDS = {
    "list": cmd_list,
    "show": cmd_show,
    "export": cmd_export,
    "create": cmd_save,
    "update": cmd_save,
}


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    # No subcommand shows the first page
    if args.command is None:
        args = parser.parse_args([*argv, "list"])

    try:
        config = ViewerConfig.load(args.config)
        return COMMANDS[args.command](config, args)

    except EmptyExportError as e:
        print(str(e))
        return 1
    except ProductNotFoundError as e:
        print(str(e))
        return 1
    except ProductSourceError as e:
        logger.error(f"Request failed: {e}")
        print(f"Error: {e}")
        return 1
    except (ValidationError, ValueError) as e:
        logger.error(f"Invalid configuration or input: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
