# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Website - Example page built with genro_htmlbuilder.

A didactic example showing both ways of closing elements:
fluent handles, closed when their parent writes again, and
``with`` blocks, closed when the block exits.

Run with:
    python examples/website/website.py
"""

from __future__ import annotations

from genro_htmlbuilder import Buffer, BuilderConfig, Node


def figure_with_caption(parent: Node, src: str, cap: str) -> None:
    """Add a subtree to any node."""
    with parent.figure() as fig:
        fig.img(src=src, alt=cap)
        fig.figcaption(cap)


def build_page(pretty: bool = True) -> str:
    """Build the sample website and return its markup."""
    buf = Buffer(BuilderConfig(pretty=pretty))
    buf.doctype()
    buf.comment(' My website ')

    with buf.html(lang='en') as html:
        with html.head() as head:
            head.title('Website!')
            head.meta(charset='utf-8')

        with html.body() as body:
            body.h1("It's a website!")

            # Fluent children: each li closes when the next one opens
            ul = body.ul()
            for i in range(1, 4):
                ul.li().a(f'Page {i}', href=f'/page_{i}.html')

            figure_with_caption(body, 'img.jpg', 'Awesome image')

            footer = body.footer()
            footer.write_text('Last modified ')
            footer.time('2021-04-12')

    return buf.finish()


if __name__ == '__main__':
    print(build_page())
