"""Climate dataset locations (relative to the data dir) and filter constants."""

ONI_PATH = "climate_data/oni_data.txt"
SST_PATH = "climate_data/sst_data.txt"
ELEVATION_PATH = "climate_data/processed_gsl_elevation_data.txt"

# SST rows kept for the NINO3 overlay: January only, study years.
SST_MONTH = 1
SST_YEAR_RANGE = (2004, 2024)

# Column holding the NINO3 anomaly in the SST file
SST_VALUE_COLUMN = 5
