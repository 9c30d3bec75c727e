"Bundled reference data."
