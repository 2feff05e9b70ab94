"""Constants shared by the clustering core and the Dash front end."""

# Fixed square viewport (x_min, x_max, y_min, y_max)
VIEWPORT = (-2.0, 2.0, -2.0, 2.0)

# Mixture-model search space, mirroring Mclust's default G = 1:9
MAX_COMPONENTS = 9
COVARIANCE_TYPES = ("full", "tied", "diag", "spherical")
RANDOM_STATE = 42
N_INIT = 1
REG_COVAR = 1e-6

# Nodes per axis of the invisible click-capture grid; odd so the centre
# and both edges of the viewport are nodes
CLICK_GRID_SIZE = 101

MSG_EMPTY = (
    "Click to add points.\n"
    "When there are at least 2 points the app will cluster automatically."
)
MSG_SINGLE = "Add at least one more point to enable clustering."
MSG_UNCLUSTERABLE = "Unable to cluster these points. Add or move points."
MSG_STALE = (
    "Points have been added since the last clustering.\n"
    "Click 'Go' to incorporate these new points in a new clustering."
)
MSG_FIT_FAILED = "Clustering failed: leaving previous clustering in place"
