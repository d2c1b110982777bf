"""Standard column names used when reading RD coordinates from tabular data.

Using consistent keys keeps Survey constructors and result frames compatible
with each other.
"""

# Column holding the RD x coordinate (easting)
DEFAULT_X_COLUMN = "x"

# Column holding the RD y coordinate (northing)
DEFAULT_Y_COLUMN = "y"

# Column holding the height above NAP in meters
DEFAULT_H_COLUMN = "h"
