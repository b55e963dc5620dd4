import sys

from long2pdf.cli import main

sys.exit(main())
