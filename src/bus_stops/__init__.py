"""Look up the TfL bus stops nearest to a UK postcode."""
