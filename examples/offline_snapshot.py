"""Filter a saved catalog snapshot without calling AWS.

Create the snapshot once with the AWS CLI:

    aws ec2 describe-instance-types --output yaml > types.yaml
    aws ec2 describe-instance-type-offerings --location-type region --output yaml > offerings.yaml

then merge the InstanceTypes and InstanceTypeOfferings keys into catalog.yaml.
"""

import sys

from shapewright import Filters, IntRange, Selector, StaticProvider

path = sys.argv[1] if len(sys.argv) > 1 else "catalog.yaml"
selector = Selector(StaticProvider.from_file(path))

for info in selector.filter_verbose(Filters(vcpus_range=IntRange(min=2, max=2), burstable=True)):
    print(f"{info['InstanceType']}: {info['MemoryInfo']['SizeInMiB']} MiB")
