# /// script
# requires-python = ">=3.10"
# dependencies = [
#     "marimo",
#     "polars",
#     "htmlhelpers",
# ]
# ///
"""
Form helpers demo: renders the generated markup next to its source.
"""

import marimo

__generated_with = "0.19.4"
app = marimo.App(width="medium", app_title="Form Helpers Demo")

with app.setup:
    import marimo as mo
    import polars as pl

    from htmlhelpers.df import grouped_collection_from_frame
    from htmlhelpers.form import (
        check_box,
        close_form,
        collection_check_boxes,
        collection_radios,
        label,
        open_form,
        select,
        text,
    )
    from htmlhelpers.ui import wrap_html


@app.cell
def title():
    mo.md("""
    # Form Helpers Demo
    """)
    return


@app.cell
def beverages():
    beverages = pl.DataFrame(
        {
            "kind": ["Coffee", "Coffee", "Tea", "Tea"],
            "code": ["bc", "wc", "gt", "bt"],
            "name": ["black", "white", "Green", "Black"],
        }
    )
    return (beverages,)


@app.cell
def form_markup(beverages):
    form_markup = "".join(
        [
            open_form("/order"),
            label("Name", "order[name]"),
            text("order[name]", None, {"placeholder": "Your name"}),
            label("Beverage", "order[beverage]"),
            select(
                "order[beverage]",
                grouped_collection_from_frame(beverages, "kind", "code", "name"),
                "gt",
            ),
            collection_radios("order[size]", {"s": "Small", "m": "Medium"}, "m"),
            collection_check_boxes("order[extras]", {"milk": "Milk", "sugar": "Sugar"}, ["milk"]),
            check_box("order[to_go]", True),
            close_form(),
        ]
    )
    return (form_markup,)


@app.cell
def rendered(form_markup):
    mo.vstack([wrap_html(form_markup), mo.md(f"```html\n{form_markup}\n```")])
    return


if __name__ == "__main__":
    app.run()
