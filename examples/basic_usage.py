"""Basic usage example for OpenCitation."""
from opencitation import OpenCitation, generate_in_text_citation

READING_LIST = [
    {
        "sourceType": "book",
        "title": "The Great Gatsby",
        "authors": [{"firstName": "F. Scott", "lastName": "Fitzgerald"}],
        "publisher": "Scribner",
        "publicationDate": {"year": 1925},
    },
    {
        "sourceType": "journal",
        "title": "Attention Is All You Need",
        "authors": [
            {"firstName": "Ashish", "lastName": "Vaswani"},
            {"firstName": "Noam", "lastName": "Shazeer"},
            {"firstName": "Niki", "lastName": "Parmar"},
        ],
        "journalTitle": "Advances in Neural Information Processing Systems",
        "volume": "30",
        "pageRange": "5998-6008",
        "publicationDate": {"year": 2017},
    },
    {
        "sourceType": "website",
        "title": "Climate Change",
        "siteName": "World Health Organization",
        "url": "https://www.who.int/health-topics/climate-change/",
        "publicationDate": {"year": 2023, "month": 10, "day": 12},
        "accessDate": {"year": 2024, "month": 1, "day": 15},
    },
]


def main():
    # Initialize OpenCitation
    print("Initializing OpenCitation...")
    oc = OpenCitation(style="apa")

    # Example 1: One citation in every style
    print("\n=== Example 1: Styles ===")
    for style in ("apa", "mla", "chicago", "harvard"):
        print(f"{style:<8} {oc.format(READING_LIST[0], style=style).text}")

    # Example 2: Reference list
    print("\n=== Example 2: Bibliography (MLA) ===")
    for entry in oc.bibliography(READING_LIST, style="mla"):
        print(f"  {entry.text}")

    # Example 3: In-text citations
    print("\n=== Example 3: In-text citations ===")
    for fields in READING_LIST:
        print(f"  {generate_in_text_citation(fields, 'harvard')}")

    # Example 4: Exchange formats
    print("\n=== Example 4: BibTeX ===")
    print(oc.export_bibtex(READING_LIST))

    print("\n=== Example 5: RIS ===")
    print(oc.export_ris(READING_LIST[:1]))


if __name__ == "__main__":
    main()
