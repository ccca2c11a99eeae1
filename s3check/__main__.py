import sys

from s3check.main import main

sys.exit(main())
