import sys

from xml_node_search.cli import main

sys.exit(main())
