import sys

from webnav.config.logging_config import configure_logging
from webnav.core.navigator import WebNavigator
from webnav.dom.utils import as_text
from webnav.network.url import PageLoadError


def main(argv):
    if len(argv) < 2:
        print("Usage: python main.py <URL> [element]")
        return 1

    configure_logging()
    try:
        nav = WebNavigator(argv[1])
    except PageLoadError as e:
        print("Cannot load {}: {}".format(argv[1], e))
        return 1

    title = nav.title()
    print(title.get_text() if title.exists() else "Untitled")

    tag = argv[2] if len(argv) > 2 else "a"
    for node in nav.page_navigation().deep().element(tag).get_nodes():
        href = node.get_attribute("href")
        print("  " + as_text(node) + (" -> " + href if href else ""))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
