"""Rich/JSON rendering of ServiceResult."""
