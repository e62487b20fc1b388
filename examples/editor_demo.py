#!/usr/bin/env python3
"""
Editor Demo - Catalog Editor Core

This script drives the editing core the way a display layer would:
- subscribes to change events and re-polls action availability after each one
- adds a product, edits one, cancels an edit and deletes one
- shows a commit being refused while the buffer is invalid

Run: python examples/editor_demo.py
"""

from typing import List

from catalog_app.editor import CatalogEditor
from catalog_app.notify import ChangeEvent


class DisplayTracker:
    """Stands in for a display layer: records events and action availability."""

    def __init__(self, editor: CatalogEditor):
        self.editor = editor
        self.events: List[ChangeEvent] = []
        self.subscription = editor.bus.subscribe(self.on_change)

    def on_change(self, event: ChangeEvent):
        self.events.append(event)

    def print_state(self, title: str):
        coordinator = self.editor.coordinator
        actions = self.editor.actions.availability()
        enabled = ", ".join(name for name, ok in actions.items() if ok) or "none"
        selected = coordinator.selected

        print(f"\n{title}")
        print(f"  Mode: {coordinator.mode.value} ({coordinator.mode_label})")
        print(f"  Selected: {selected.title if selected else '-'}")
        print(f"  Buffer: {coordinator.buffer.title or '<blank>'} / {coordinator.buffer.price}")
        print(f"  Enabled actions: {enabled}")
        print(f"  Change events since last step: {len(self.events)}")
        self.events.clear()


def print_products(editor: CatalogEditor):
    print("\n📦 PRODUCTS")
    print("=" * 50)
    for product in editor.coordinator.products:
        print(f"  #{product.id:<3} {product.title:<22} {product.company:<8} "
              f"{product.category:<10} {product.price:>8} x{product.stock_quantity}")


def main():
    editor = CatalogEditor()
    tracker = DisplayTracker(editor)
    coordinator = editor.coordinator

    print_products(editor)
    tracker.print_state("Initial state")

    # Add a product
    editor.actions.execute("new")
    tracker.print_state("After 'new'")

    coordinator.update_buffer(title="Pixel 9", company="Google", category="Смартфоны")
    tracker.print_state("Partially filled buffer (commit still disabled)")

    coordinator.update_buffer(price=69990, stock_quantity=10)
    editor.actions.execute("commit")
    tracker.print_state("After committing Pixel 9")

    # Refused commit
    coordinator.select_id(3)
    editor.actions.execute("edit")
    coordinator.update_buffer(price=0)
    result = coordinator.commit()
    print(f"\n⛔ Commit with price 0 accepted: {result.accepted}")
    for error in coordinator.validation_errors:
        print(f"  • {error.field}: {error.message}")

    editor.actions.execute("cancel")
    tracker.print_state("After cancelling the edit")

    # Delete
    coordinator.select_id(1)
    editor.actions.execute("delete")
    tracker.print_state("After deleting product #1")

    print_products(editor)
    tracker.subscription.unsubscribe()


if __name__ == "__main__":
    main()
