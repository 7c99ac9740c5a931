"""Timing for building a sample page.

Run with:
    python benchmarks/benchmark_sample.py
"""

import timeit

from genro_htmlbuilder import Buffer, BuilderConfig


def sample_html(config: BuilderConfig) -> str:
    """Build a small page mixing fluent handles and with blocks."""
    buf = Buffer(config)
    buf.doctype()
    html = buf.html(lang="en")
    head = html.head()
    head.title("Website!")
    head.meta(charset="utf-8")
    with html.body() as body:
        body.h1("It's a website!")
        ul = body.ul()
        for i in range(2):
            ul.li().a(f"Page {i}", href=f"/page_{i}.html")
        with body.figure() as fig:
            fig.img(src="img.jpg", alt="Awesome image")
            fig.figcaption("Awesome image")
        footer = body.footer()
        footer.write_text("Last modified ")
        footer.time("2021-04-12")
        body.comment("Thanks for reading")
    return buf.finish()


def main() -> None:
    number = 5000
    for config in (BuilderConfig(), BuilderConfig(pretty=True)):
        seconds = timeit.timeit(lambda: sample_html(config), number=number)
        label = "pretty" if config.pretty else "compact"
        print(f"{label:8} {seconds / number * 1e6:8.1f} us/page")


if __name__ == "__main__":
    main()
