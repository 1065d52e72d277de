"""Run 1000 scans from a thread pool; each owns its own producer thread."""

from concurrent.futures import ThreadPoolExecutor

from maxo import ScanConfig, transform

docs = [f"line {i} of document number {i}" for i in range(1000)]
config = ScanConfig(buffer_size=16)

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(lambda doc: transform(doc, config=config), docs))

print(f"Transformed {len(results)} documents in parallel")
print("First:", results[0])
print("Last:", results[-1])
