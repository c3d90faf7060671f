"""Find Go packages via pkg.go.dev."""
