#!/usr/bin/env python3
"""
Example usage of the XML JSON Writer.

This script builds a small document tree by hand, parses another from XML
text, and prints both in every mapping convention.
"""

import sys
from xml_json_writer import Convention, Document, JSONWriter, to_json
from xml_json_writer.io import document_from_string


def build_library() -> Document:
    """Build a document tree with the builder methods."""
    doc = Document.with_root("library")
    doc.root.add_attribute("city", "Kraków")
    for title, author in [("Solaris", "Stanisław Lem"), ("Dune", "Frank Herbert")]:
        book = doc.root.add_element("book")
        book.add_attribute("lang", "en")
        book.add_element("title").set_text(title)
        book.add_element("author").set_text(author)
    return doc


def main():
    """Main example function."""
    print("XML JSON Writer Example")
    print("=" * 50)

    library = build_library()
    for convention in Convention:
        print(f"\n{convention.value}:")
        print(to_json(library, convention, indent=2))

    print("\nMixed content, streamed to stdout:")
    doc = document_from_string("<p>Read <em>this</em> first, then <a href='/next'>that</a>.</p>")
    for convention in Convention:
        writer = JSONWriter(sys.stdout, convention=convention)
        writer.write(doc)
        sys.stdout.write("\n")


if __name__ == "__main__":
    main()
